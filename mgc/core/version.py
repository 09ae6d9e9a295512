"""MGC - version constants.

Keep this module tiny and dependency-free. It is imported by many places
(geometry, session, UI) and must not have side effects.
"""

APP_NAME = "MagicCircle"
APP_SHORT = "MGC"

APP_VERSION = "1.0.0"

# Defaults (in window pixels)
# NOTE: these reproduce the look of the first release; settings may override them.
DEFAULT_WINDOW_SIZE = (800, 500)
DEFAULT_STROKE_WIDTH = 3
DEFAULT_DOT_RADIUS = 3
