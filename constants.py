# constants.py
"""
Application-level constants.

These values are static and do not change between runs. They cover the
host window, the fixed physics of the particle field and the default
timing of the headline typewriter. Anything an operator may want to tune
lives in `config.json` instead and falls back to the defaults below.
"""

# Visualization settings
# Set to True to run in borderless fullscreen mode.
# Set to False to run in a resizable window of DEFAULT_WINDOW_SIZE.
FULLSCREEN = False
DEFAULT_WINDOW_SIZE = (1280, 720)
FPS = 60
BACKGROUND_COLOR = (10, 14, 28) # Deep navy
PARTICLE_COLOR = (120, 170, 255)
TEXT_COLOR = (255, 255, 255)
HEADLINE_FONT_SIZE = 56
TOAST_FONT_SIZE = 20

# Alpha value for the motion blur effect (0-255). Lower is a longer trail.
MOTION_BLUR_ALPHA = 90

# --- Particle Field ---
DEFAULT_PARTICLE_COUNT = 50
DEFAULT_PARTICLE_SPEED = 0.5
DEFAULT_PARTICLE_SIZE_MIN = 2.0
DEFAULT_PARTICLE_SIZE_MAX = 6.0
# Opacity is not configurable; every particle draws from this range.
PARTICLE_OPACITY_MIN = 0.1
PARTICLE_OPACITY_MAX = 0.5
# Pointer force field: linear falloff from the pointer to this radius (px).
POINTER_INTERACTION_RADIUS = 100.0
POINTER_FORCE_COEFFICIENT = 0.01
RESIZE_DEBOUNCE_MS = 250

# --- Typewriter ---
DEFAULT_TYPE_DELAY_MS = 150
DEFAULT_DELETE_DELAY_MS = 75
DEFAULT_PAUSE_DELAY_MS = 2000
DEFAULT_CYCLE_DELAY_MS = 500
DEFAULT_TYPING_START_DELAY_MS = 3000
DEFAULT_PHRASES = (
    "Naturally Smart",
    "Data-Driven",
    "Future-Ready",
    "Intelligent",
    "Innovative",
)

# --- Toasts & Contact Form ---
DEFAULT_TOAST_DURATION_MS = 4000
EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
TOAST_COLORS = {
    "success": (16, 185, 129),
    "error": (239, 68, 68),
    "info": (59, 130, 246),
}
