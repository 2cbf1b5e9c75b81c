"""
Logging configuration for the Flask application.

Containers collect stdout, so records always go to a stream handler; a
rotating file handler is added when LOG_FILE is set.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOG_FORMAT = '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'


def setup_logging(app):
    """
    Configure ``app.logger``.

    - Level from LOG_LEVEL (default INFO).
    - Under Gunicorn, follow the level of the ``gunicorn.error`` logger so
      ``--log-level`` controls application records too.
    - Optional rotating file: max 10MB, 10 backups.
    """
    formatter = logging.Formatter(LOG_FORMAT)
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO

    gunicorn_logger = logging.getLogger('gunicorn.error')
    if gunicorn_logger.handlers:
        level = gunicorn_logger.level

    # create_app may run more than once per process (tests)
    for handler in list(app.logger.handlers):
        if getattr(handler, '_propline', False):
            app.logger.removeHandler(handler)
            handler.close()

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    stream_handler._propline = True
    app.logger.addHandler(stream_handler)

    log_file = app.config.get('LOG_FILE')
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10240000,  # 10MB
            backupCount=10
        )
        file_handler.setFormatter(formatter)
        file_handler._propline = True
        app.logger.addHandler(file_handler)

    app.logger.setLevel(level)
    return app.logger
