"""
Path Smoothing Configuration
Contains the numeric constants and defaults used by the smoothing core
"""

import math

# Corner detection
NEGLIGIBLE_ANGLE_RAD = 1e-2  # corners closer than this to a straight line are not smoothed
STRAIGHT_ANGLE_RAD = 1e-12  # C2 blends need a resolvable end curvature

# Cubic spiral (y = K*x^3) transitions
CUBIC_TABLE_SAMPLES = 10000  # samples in the arc-length lookup table
CUBIC_K_MIN = 0.2  # K used at smoothing factor 1.0
CUBIC_K_MAX = 20.0  # K used at smoothing factor 0.0
CUBIC_RADIUS_TOLERANCE = 0.1  # allowed relative error of the end radius
CUBIC_K_GROWTH = 1.01  # K multiplier per correction step
MAX_RADIUS_ITERATIONS = 10000  # correction steps before giving up
CUBIC_GUIDE_SCALE = 10.0  # width multiplier for drawn guide arms

# Clothoid (Euler spiral) transitions
CLOTHOID_SAMPLE_STEP = 1e-4  # spacing of the three samples used for end curvature
CLOTHOID_GUIDE_LENGTH = 2.5  # arc length of drawn guide arms
CURVATURE_SCALE = math.pi  # normalized Fresnel spiral: curvature = pi * s

# Curvature plot
CURVATURE_WINDOW = 10  # measurements averaged into one plot point

# Screen mapping (world units -> pixels)
DEFAULT_ZOOM = 200.0
DEFAULT_SHIFT = (150.0, 450.0)

# Demo mission
DEFAULT_WAYPOINTS = [
    (0.6, -0.3),
    (-0.3, 2.0),
    (3.3, 0.23),
    (3.5, 1.47),
]
DEFAULT_SMOOTHING_FACTOR = 1.0
