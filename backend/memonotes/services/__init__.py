# Services package init
"""
MemoNotes Backend — Services Layer
=====================================

What:  State-holding layer sitting between routes (HTTP) and the data records.

Service Inventory:
    - NoteStore: in-memory name → text mapping with CRUD rules and locking

Routes receive the store through FastAPI's dependency injection
(memonotes.dependencies.get_note_store); nothing imports a global instance.
"""
