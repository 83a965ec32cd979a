"""Module for initializing settings related to the built-in ledger logger
Functions:
-get_logger
-overwrite_logger_level"""

import logging, coloredlogs
import os

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
_LOG_LVL = os.getenv('LOG_LEVEL', None)
if _LOG_LVL:
    assert _LOG_LVL in VALID_LVLS, "Log level {} not in valid levels {}".format(_LOG_LVL, VALID_LVLS)
    _LOG_LVL = getattr(logging, _LOG_LVL)
else:
    _LOG_LVL = logging.WARNING

_LOG_FILE = os.getenv('LOG_FILE', None)

format = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)-2s %(message)s'.format(
    os.getenv('HOST_NAME', 'Ledger'))

"""
Custom Log Levels
"""
#   Default levels
# 'CRITICAL': 50,
# 'ERROR': 40,
# 'WARNING': 30,
# 'INFO': 20,
# 'DEBUG' : 10

CUSTOM_LEVELS = {
    'NOTICE': 22,
}

for log_name, log_level in CUSTOM_LEVELS.items():
    logging.addLevelName(log_level, log_name)


def apply_custom_level(log, name: str, level: int):
    def _lvl_func(message, *args, **kws):
        if log.isEnabledFor(level):
            log._log(level, message, args, **kws)

    setattr(log, name.lower(), _lvl_func)


"""
Custom Styling
"""

LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'notice': {'color': 'magenta'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}

FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'hostname': {'color': 'magenta'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
    'programname': {'color': 'cyan'}
}


class ColoredStreamHandler(logging.StreamHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(
            coloredlogs.ColoredFormatter(format, level_styles=LEVEL_STYLES, field_styles=FIELD_STYLES)
        )


def _handlers():
    handlers = [ColoredStreamHandler()]

    if _LOG_FILE:
        log_dir = os.path.dirname(_LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(_LOG_FILE, delay=True)
        file_handler.setFormatter(logging.Formatter(format))
        handlers.append(file_handler)

    return handlers


def get_logger(name=''):
    log = logging.getLogger(name)
    log.setLevel(_LOG_LVL)

    # Handlers are attached once per named logger so repeated calls do not duplicate output
    if not log.handlers:
        for handler in _handlers():
            log.addHandler(handler)
        log.propagate = False

    for log_name, log_level in CUSTOM_LEVELS.items():
        apply_custom_level(log, log_name, log_level)

    return log


def overwrite_logger_level(level):
    global _LOG_LVL
    _LOG_LVL = level

    for name in logging.Logger.manager.loggerDict.keys():
        log = logging.getLogger(name)
        log.setLevel(level)
