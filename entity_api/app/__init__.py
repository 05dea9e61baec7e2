"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Configuration, logging, error handling, the in‑memory
store and the request logger live in ``core``; request and response
models in ``schemas``; business rules in ``services``; and the HTTP
routes in ``api``.
"""

from .main import app, create_app  # noqa: F401
