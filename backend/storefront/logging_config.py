import logging
import logging.handlers
import os
from flask.logging import default_handler


def configure_logging(app):
    """
    Attach handlers to ``app.logger``.

    - Level from ``LOG_LEVEL``
    - Rotating file handler when ``LOG_FILE`` is set
    """
    log_level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s %(name)-28s %(levelname)-8s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    app.logger.removeHandler(default_handler)
    handlers = []

    if not app.testing:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        handlers.append(stream_handler)

    log_file = app.config.get("LOG_FILE")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # app.logger is the "storefront" logger; module loggers propagate to it
    app.logger.setLevel(log_level)
    for handler in handlers:
        app.logger.addHandler(handler)

    if not app.debug:
        logging.getLogger("werkzeug").setLevel(logging.WARNING)
