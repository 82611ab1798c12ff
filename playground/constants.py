"""Shared constants.

Keeps the handful of magic numbers used by the pages and the walkthrough
harness in one place.
"""

# Time
SECONDS_PER_HOUR = 3600
HOURS_PER_YEAR = 8760  # 365 days, no leap handling
ONE_YEAR_BACK = -SECONDS_PER_HOUR * HOURS_PER_YEAR  # the DeLorean demo jump

# Drawing
CANVAS_SIZE = (320, 240)  # off-screen surface for the Open-Closed page
BACKGROUND_COLOR = (24, 24, 32)
SHAPE_COLOR = (240, 200, 80)
SHAPE_SCALE = 20  # pixels per unit of shape dimension
SHAPE_LINE_WIDTH = 0  # 0 fills the shape

# Files (relative to the working directory unless overridden in settings)
SETTINGS_FILE = "data/settings.json"
DEFAULT_STORAGE_PATH = "data/storage.log"
DEFAULT_ERROR_LOG_PATH = "data/errors.log"
DEFAULT_SNAPSHOT_PATH = "data/open_closed.png"

__all__ = [name for name in globals().keys() if name.isupper()]
