import threading


class TodoStore:
    """In-memory, insertion-ordered list of todos shared by every request.

    All access goes through a single lock. The lock is only held while the
    list is appended to or copied, never while rendering.
    """

    def __init__(self, items=None):
        self._todos = list(items or [])
        self._lock = threading.Lock()

    def snapshot(self):
        """Return a copy of the current todos"""
        with self._lock:
            return list(self._todos)

    def append(self, todo):
        """Append a todo and return a copy of the list including it"""
        with self._lock:
            self._todos.append(todo)
            return list(self._todos)

    def __len__(self):
        with self._lock:
            return len(self._todos)
