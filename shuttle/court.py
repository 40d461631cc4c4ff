"""Badminton court layout constants.

The court is laid out lengthwise: team A on the near (left) half, team B on
the far (right) half, net across the middle. Units are centimetres of the
real 13.40 m x 6.10 m doubles court, offset by a drawing margin.
"""

# Drawing margin around the court
PADDING = 50

# Doubles court outline
COURT_X = PADDING
COURT_Y = PADDING
COURT_LENGTH = 1340
COURT_WIDTH = 610

# Net and centre line
NET_X = COURT_X + COURT_LENGTH / 2
CENTRE_Y = COURT_WIDTH / 2  # measured from the top margin, as drawn

# Service lines
SHORT_SERVICE_OFFSET = 198         # 1.98 m from the net
DOUBLES_LONG_SERVICE_OFFSET = 76   # 0.76 m inside the back line
SINGLES_SIDE_OFFSET = 46           # 0.46 m inside the doubles side line

# Player marker rows (quarter of the court width into each half)
MARKER_TOP_Y = PADDING + COURT_WIDTH / 4
MARKER_BOTTOM_Y = CENTRE_Y + PADDING + COURT_WIDTH / 4

# Player marker columns (quarter of the court length into each half)
MARKER_NEAR_X = COURT_X + COURT_LENGTH / 4
MARKER_FAR_X = COURT_X + COURT_LENGTH * 3 / 4
