"""Shared constants for termlink."""

TERMLINK_HOME_EXT = ".termlink"
TERMLINK_HOME_ENV = "TERMLINK_HOME"
CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "termlink.log"
