from todo_app.web import create_app

__all__ = ['create_app']
