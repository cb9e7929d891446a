"""
MemoNotes Backend — Application Package Initializer
===================================================

What: Marks the `memonotes` directory as a Python package.
Who:  Used by uvicorn, pytest, and the `memonotes` console script.

Architecture Note:
    The backend follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │       Services (Note Store)         │  ← CRUD rules, locking
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Note record + Pydantic
    └─────────────────────────────────────┘

    Notes live in process memory only. Restarting the server yields an
    empty store.
"""

__version__ = "1.0.0"
