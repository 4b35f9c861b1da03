"""
Configuration & Global Constants
================================
This module serves as the central registry for application-wide constants.

Why is this file needed?
------------------------
1. Abstraction: names shown to the user and defaults for new log rows are
   defined once instead of being repeated in the model and the view.
2. Qt identity: organization/application ids are used by
   `ghanfoot.application.create_app` to configure QSettings and the window.

Exports:
    ORG_ID, APP_ID, VISIBLE_APP_NAME: Application identity.
    DEFAULT_LENGTH_UNIT, DEFAULT_CIRCUMFERENCE_UNIT: Units of a new log row.
    LENGTH_UNIT_CHOICES, CIRCUMFERENCE_UNIT_CHOICES: Order of the unit selectors.
    LOG_FORMAT, LOG_DATE_FORMAT, DEFAULT_LOG_LEVEL: Logging defaults.
    default_log_file(): Log file named by the GHANFOOT_LOG_FILE variable.
"""
import logging
import os
from typing import Optional

from ghanfoot.model.units import Unit

ORG_ID = "ghanfoot"
APP_ID = "ghanfoot-calculator"
VISIBLE_APP_NAME = "Ghan-foot Calculator"

WINDOW_SIZE: tuple[int, int] = (720, 640)

# New rows: length in meters, circumference in centimeters
DEFAULT_LENGTH_UNIT: Unit = Unit.METER
DEFAULT_CIRCUMFERENCE_UNIT: Unit = Unit.CENTIMETER

LENGTH_UNIT_CHOICES: list[Unit] = [Unit.METER, Unit.CENTIMETER, Unit.FOOT, Unit.INCH]
CIRCUMFERENCE_UNIT_CHOICES: list[Unit] = [Unit.CENTIMETER, Unit.METER, Unit.INCH, Unit.FOOT]

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'
DEFAULT_LOG_LEVEL = logging.INFO
LOG_FILE_ENV = "GHANFOOT_LOG_FILE"


def default_log_file() -> Optional[str]:
    """Log file path from the environment, None (console only) when unset."""
    return os.environ.get(LOG_FILE_ENV) or None
