# constants.py

"""
Application Constants

This module defines static default values for the bokeh field and its demo
window. Runtime overrides live in config.json.

Data Contract:
- All values are immutable constants.
- Units are specified in comments where applicable.
"""

# Screen dimensions
WIDTH = 1280  # Pixels
HEIGHT = 720  # Pixels

# Framerate
FPS = 60  # Frames per second

# Window Title
TITLE = "Bokeh"

# Pool defaults
DEFAULT_COUNT = 20
DEFAULT_LEG_DURATION = 100000.0  # Milliseconds
DEFAULT_COLOR = (100, 100, 100, 150)  # RGBA, translucent gray

# Motion ranges used by the random planner
MAX_OFFSET = 500.0  # Pixels, either direction from the viewport center
MAX_INITIAL_SCALE = 0.5  # Fraction of the shared viewport radius

# Visual Effects
BACKGROUND_COLOR = (12, 12, 18)

# Soft glow settings
GLOW_RADIUS = 12  # Downscale factor for the blur pass. Larger is more diffuse.
GLOW_INTENSITY = 90  # Brightness of the glow (0-255).
