"""
Server-rendered TodoMVC package.

The FastAPI application lives in `todomvc.main`; `create_app()` builds a fresh
instance with its own in-memory store and `app` is the default one.
"""
