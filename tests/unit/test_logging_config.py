"""
Unit tests for logging setup.

Tests validate:
- Console records go to stderr, keeping stdout for results
- Optional rotating file handler
- Library warnings are captured and quiet unless debugging
"""

import io
import logging
import logging.handlers
import sys
import warnings

import pytest

from config.logging_config import NOISY_LOGGERS, setup_logging, setup_logging_from_config
from config.settings import LoggingConfig


pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    noisy = {name: logging.getLogger(name).level for name in NOISY_LOGGERS}
    yield
    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, noisy_level in noisy.items():
        logging.getLogger(name).setLevel(noisy_level)
    logging.captureWarnings(False)


class TestSetupLogging:

    def test_console_on_stderr(self):
        root = setup_logging('INFO')

        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert root.level == logging.INFO

    def test_custom_stream(self):
        stream = io.StringIO()
        setup_logging('INFO', stream=stream)
        logging.getLogger('rrcalc.test').info('sized')

        assert 'INFO' in stream.getvalue()
        assert 'sized' in stream.getvalue()

    def test_unknown_level_falls_back(self):
        assert setup_logging('LOUD').level == logging.INFO

    def test_lowercase_level(self):
        assert setup_logging('debug').level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / 'logs' / 'calc.log'
        root = setup_logging('INFO', log_file=str(log_file))

        logging.getLogger('rrcalc.test').info('sized 400 units')
        for handler in root.handlers:
            handler.flush()

        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers)
        assert 'sized 400 units' in log_file.read_text()

    def test_repeated_setup_replaces_handlers(self):
        setup_logging('INFO')
        assert len(setup_logging('INFO').handlers) == 1


class TestWarnings:

    def test_quiet_unless_debugging(self):
        setup_logging('INFO')
        assert logging.getLogger('py.warnings').level == logging.ERROR

        setup_logging('DEBUG')
        assert logging.getLogger('py.warnings').level == logging.DEBUG

    def test_warnings_become_records(self):
        stream = io.StringIO()
        with warnings.catch_warnings():
            warnings.simplefilter('always')
            setup_logging('DEBUG', stream=stream)
            warnings.warn('chained assignment', UserWarning)

        assert 'py.warnings' in stream.getvalue()
        assert 'chained assignment' in stream.getvalue()


class TestFromConfig:

    def test_format_from_config(self):
        root = setup_logging_from_config(LoggingConfig(format='%(levelname)s %(message)s'))

        record = logging.LogRecord('rrcalc', logging.INFO, __file__, 1, 'hello', None, None)
        assert root.handlers[0].format(record) == 'INFO hello'

    def test_debug_flag_wins(self):
        root = setup_logging_from_config(LoggingConfig(level='WARNING'), debug=True)
        assert root.level == logging.DEBUG
