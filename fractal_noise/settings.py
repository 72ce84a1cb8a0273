# -*- coding: utf-8 -*-
"""Core settings and configuration."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)


# Noise defaults
DEFAULT_SEED = None
DEFAULT_DIMENSIONS = 2
DEFAULT_MIN = 0
DEFAULT_MAX = 1
DEFAULT_WAVELENGTH = 1
DEFAULT_OCTAVES = 8
DEFAULT_OCTAVE_SCALE = 0.5
DEFAULT_PERSISTENCE = 0.5
DEFAULT_INTERPOLATION = "cosine"

# How close persistence must be to 1 before the arithmetic mean is used
# in place of the geometric series.
PERSISTENCE_TOLERANCE = 1e-9

# Lattice stores log each time they grow past a power of two at or
# above this many points.
LATTICE_LOG_THRESHOLD = 1024

# Logging
LOG_LEVEL = "WARNING"
LOG_PATH = None  # Set to a file path to also log to a rotating file.
LOG_TIME_FORMAT_CONSOLE = "%H:%M:%S,%F"
LOG_TIME_FORMAT_FILE = "%Y-%m-%d %a %H:%M:%S,%F"
LOG_ROTATE_WHEN = "midnight"
LOG_ROTATE_INTERVAL = 1
LOG_UTC_TIMES = False
