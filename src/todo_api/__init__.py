"""
Todo API package.

An in-memory users/todos service built on FastAPI. The ASGI application
lives in ``todo_api.main`` (``todo_api.main:app``); ``create_app`` builds
a fresh application with its own data store.
"""

__version__ = "1.0.0"
