"""
HTTP API package.

``router.py`` aggregates the domain routers defined in ``endpoints``;
``deps.py`` holds the dependencies that hand services to the handlers.
"""
