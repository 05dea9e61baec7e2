"""
Pydantic schema definitions for API payloads.

Schemas are separated from the in‑memory records in ``core.store`` to
decouple the API representation from storage.
"""
