# Copyright (c) 2014-2015  Sam Maloney.
# License: GPL v2.

import logging
import logging.config
import os

logging_initialized = False

DEFAULT_CONFIG_FILE =\
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "logging.ini")

def init(config_file=None):
    """Configures logging from an INI file, once per process.

    Never called on import; the host application owns the logging setup
    unless it asks for this one.
    """

    global logging_initialized

    if logging_initialized:
        return

    if config_file is None:
        config_file = DEFAULT_CONFIG_FILE

    logging.config.fileConfig(config_file, disable_existing_loggers=False)
    logging_initialized = True
