import pytest

from todo_app.store import TodoStore
from todo_app.web import create_app


@pytest.fixture()
def store():
    return TodoStore()


@pytest.fixture()
def app(store, tmp_path):
    (tmp_path / "main.css").write_text("body { color: #333; }")
    app = create_app(store=store, assets_dir=str(tmp_path))
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
