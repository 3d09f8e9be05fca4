BACKGROUND = "#2A2A2A"

# Guide rings
GUIDE_STROKE = "#373737"
GUIDE_STROKE_WEIGHT = 0.6

# Center dot
CENTER_DOT_FILL = "#464646"
CENTER_DOT_DIAMETER = 5

# Inactive hour markers are outlined over the background
INACTIVE_STROKE = "#B9B9B9"
INACTIVE_STROKE_WEIGHT = 1.2

# Header and status footer
TITLE_TEXT = "// THREE RINGS //"
TITLE_SIZE = 20
TITLE_Y = 38
TITLE_FILL = "#FFFFFF"
FOOTER_SIZE = 12
FOOTER_MARGIN = 26
FOOTER_FILL = "#646464"
