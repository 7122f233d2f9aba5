import logging

from todo_app.rendering import render

logger = logging.getLogger(__name__)

TODO_FIELD = 'todo'


class MalformedRequest(Exception):
    """The submitted form is missing a required field"""


def show_main_page(render=render):
    return render('main-page')


def show_secondary_page(render=render):
    return render('another-page')


def add_item(store, form, render=render):
    """Append the submitted todo and render the updated list fragment.

    The append stays in the store even when rendering fails; only this
    caller's response is affected.
    """
    todo = form.get(TODO_FIELD)
    if todo is None:
        raise MalformedRequest(f"missing form field '{TODO_FIELD}'")

    todos = store.append(todo)
    logger.debug(f"Added todo, list now has {len(todos)} items")
    return render('item-list', {'items': todos})
