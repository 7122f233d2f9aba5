import logging
import os

from flask import Flask, request

from todo_app.handlers import (
    MalformedRequest,
    add_item,
    show_main_page,
    show_secondary_page,
)
from todo_app.rendering import RenderError, render
from todo_app.store import TodoStore

logger = logging.getLogger(__name__)

HTML_CONTENT_TYPE = 'text/html; charset=utf-8'
TEXT_CONTENT_TYPE = 'text/plain; charset=utf-8'


def create_app(store=None, renderer=None, assets_dir=None):
    """Build the Flask app around one shared TodoStore"""
    if store is None:
        store = TodoStore()
    if renderer is None:
        renderer = render
    if not assets_dir:
        assets_dir = os.path.join(os.getcwd(), 'assets')
    # Flask resolves relative folders against the package, not the working directory
    assets_dir = os.path.abspath(assets_dir)

    app = Flask(__name__, static_folder=assets_dir, static_url_path='/assets')
    app.extensions['todo_store'] = store

    @app.route('/', methods=['GET'])
    def index():
        return show_main_page(renderer), 200, {'Content-Type': HTML_CONTENT_TYPE}

    @app.route('/another-page', methods=['GET'])
    def another_page():
        return show_secondary_page(renderer), 200, {'Content-Type': HTML_CONTENT_TYPE}

    @app.route('/api', methods=['GET'])
    def api():
        return 'Hello!', 200, {'Content-Type': TEXT_CONTENT_TYPE}

    @app.route('/todos', methods=['POST'])
    def add_todo():
        return add_item(store, request.form, renderer), 200, {'Content-Type': HTML_CONTENT_TYPE}

    @app.errorhandler(RenderError)
    def render_failed(e):
        logger.error(f"Failed to render template: {e}")
        return f"Failed to render template. Error: {e}", 500, {'Content-Type': TEXT_CONTENT_TYPE}

    @app.errorhandler(MalformedRequest)
    def malformed_request(e):
        logger.warning(f"Rejected request to {request.path}: {e}")
        return f"Malformed request. Error: {e}", 400, {'Content-Type': TEXT_CONTENT_TYPE}

    return app
