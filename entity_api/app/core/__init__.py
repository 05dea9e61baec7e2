"""
Core infrastructure shared by every part of the application:
settings, logging setup, domain errors, the in‑memory store and the
request logger middleware.
"""
