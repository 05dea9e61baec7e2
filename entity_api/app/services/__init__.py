"""
Service layer abstraction.

Each service encapsulates the business rules for a domain and works
against the store it is given, so API handlers never touch the
collections directly.
"""
