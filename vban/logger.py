"""Module for initializing settings related to the built-in ledger logger
Functions:
-get_logger"""

import logging, coloredlogs
import os

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
_LOG_LVL = os.getenv('LOG_LEVEL', None)
if _LOG_LVL:
    assert _LOG_LVL in VALID_LVLS, "Log level {} not in valid levels {}".format(_LOG_LVL, VALID_LVLS)
    _LOG_LVL = getattr(logging, _LOG_LVL)
else:
    _LOG_LVL = logging.INFO

_LOG_DIR = os.getenv('LOG_DIR', None)

format = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)-2s %(message)s'.format(
    os.getenv('HOST_NAME', 'Ledger')
)

"""
Custom Styling
"""

coloredlogs.DEFAULT_LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}
coloredlogs.DEFAULT_FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
}


class ColoredFileHandler(logging.FileHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(
            coloredlogs.ColoredFormatter(format)
        )


class ColoredStreamHandler(logging.StreamHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(
            coloredlogs.ColoredFormatter(format)
        )


def _ignore(*args, **kwargs):
    pass


class MockLogger:
    def __getattr__(self, item):
        return _ignore


def _handlers(name):
    handlers = [ColoredStreamHandler()]

    if _LOG_DIR:
        os.makedirs(_LOG_DIR, exist_ok=True)
        filename = os.path.join(_LOG_DIR, '{}.log'.format(name or 'vban'))

        plain = logging.FileHandler(filename, delay=True)
        plain.setFormatter(logging.Formatter(format))

        handlers.append(plain)
        handlers.append(ColoredFileHandler('{}_color'.format(filename), delay=True))

    return handlers


def get_logger(name=''):
    if _LOG_LVL < 0:
        return MockLogger()

    log = logging.getLogger(name)
    log.setLevel(_LOG_LVL)

    # Loggers are cached by name, so only attach handlers the first time through
    if not log.handlers:
        for handler in _handlers(name):
            log.addHandler(handler)
        log.propagate = False

    return log

