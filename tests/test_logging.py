"""
Tests for application logging setup.
"""

import logging

from config import TestingConfig
from propline import create_app


def own_handlers(logger):
    return [h for h in logger.handlers if getattr(h, '_propline', False)]


def test_stream_handler_not_duplicated():
    create_app(TestingConfig)
    app = create_app(TestingConfig)

    handlers = own_handlers(app.logger)
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)


def test_level_from_config():
    class QuietConfig(TestingConfig):
        LOG_LEVEL = 'warning'

    app = create_app(QuietConfig)
    assert app.logger.level == logging.WARNING


def test_rotating_file_handler(tmp_path):
    log_file = tmp_path / 'logs' / 'propline.log'

    class FileConfig(TestingConfig):
        LOG_FILE = str(log_file)

    app = create_app(FileConfig)
    app.logger.info('hello from test')
    for handler in app.logger.handlers:
        handler.flush()

    assert log_file.exists()
    assert 'hello from test' in log_file.read_text()

    # Release the file for tmp_path cleanup
    create_app(TestingConfig)
