from flask import render_template_string
from jinja2 import TemplateError

# Full page with the htmx form; the list fragment is swapped in place of #todo-list
main_page_template = '''
<!doctype html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Todo App</title>
    <link rel="stylesheet" href="/assets/main.css">
    <script src="https://unpkg.com/htmx.org@1.9.12"></script>
</head>
<body>
    <h1>Todo List</h1>
    <form hx-post="/todos" hx-target="#todo-list" hx-swap="outerHTML"
          hx-on::after-request="this.reset()">
        <input type="text" name="todo" placeholder="Enter new todo" required>
        <button type="submit">Add</button>
    </form>
    <ul id="todo-list"></ul>
    <a href="/another-page">Another page</a>
</body>
</html>
'''

another_page_template = '''
<!doctype html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Another Page</title>
    <link rel="stylesheet" href="/assets/main.css">
</head>
<body>
    <h1>Another Page</h1>
    <p>Nothing to see here.</p>
    <a href="/">Back to the todo list</a>
</body>
</html>
'''

item_list_template = '''
<ul id="todo-list">
{% for item in items %}
    <li>{{ item }}</li>
{% endfor %}
</ul>
'''

VIEWS = {
    'main-page': main_page_template,
    'another-page': another_page_template,
    'item-list': item_list_template,
}


class RenderError(Exception):
    """A view could not be rendered"""

    def __init__(self, view, reason):
        super().__init__(f"{view}: {reason}")
        self.view = view
        self.reason = reason


def render(view, data=None):
    """Render a named view with Flask's Jinja environment.

    Needs an application context. Raises RenderError for unknown views and
    for any template error raised while rendering.
    """
    template = VIEWS.get(view)
    if template is None:
        raise RenderError(view, "unknown view")
    try:
        return render_template_string(template, **(data or {}))
    except TemplateError as e:
        raise RenderError(view, e) from e
