import logging

from todo_app.config import Settings, configure_logging
from todo_app.web import create_app

logger = logging.getLogger(__name__)


def build_app(settings=None):
    """Configure logging and build the app served by both the dev server and WSGI servers"""
    if settings is None:
        settings = Settings.from_env()
    configure_logging(settings.log_level)

    logger.info("router init...")
    return create_app(assets_dir=settings.assets_dir)


def main(app=None, settings=None):
    if settings is None:
        settings = Settings.from_env()
    if app is None:
        app = build_app(settings)

    logger.info(f"router init complete: now listening on port {settings.port}")
    # threaded=True serves each request on its own worker thread
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == '__main__':
    main()
