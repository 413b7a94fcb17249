"""
Todo API package.

Layered in-memory Todo service: routers -> controllers -> services -> repositories.
The application factory lives in todo_api.main (create_app); todo_api.main.app is the
default instance served by the todo-api console script.
"""

__version__ = "0.1.0"
