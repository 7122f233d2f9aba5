#!/usr/bin/env python3
"""WSGI entry point: `gunicorn app:app`, or run directly for the dev server."""
from todo_app.__main__ import build_app, main
from todo_app.config import Settings

settings = Settings.from_env()
app = build_app(settings)

if __name__ == '__main__':
    main(app, settings)
