# -*- coding: utf-8 -*-
"""Configuration for testing through py.test."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from os.path import abspath, dirname, join
import sys


TEST_ROOT = dirname(abspath(__file__))
sys.path.insert(0, dirname(TEST_ROOT))

from fractal_noise import ROOT_DIR, settings


# Log everything to a file during testing.
settings.LOG_LEVEL = "DEBUG"
settings.LOG_PATH = join(ROOT_DIR, "logs", "test.log")


# Importing the package has already loaded the default logging
# configuration, so it needs to be reloaded with the test settings.
from fractal_noise.core.logs import configure_logging, get_logger

configure_logging()
log = get_logger("tests")


# Send out a message to signal the start of a test run.
log.debug("====== TESTS START ======")
