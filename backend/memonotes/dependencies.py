"""
MemoNotes Backend — Request Dependencies
==========================================

What:  FastAPI dependencies that hand application-scoped objects to routes.
How:   create_app() stores the NoteStore on app.state; get_note_store
       reads it back from the incoming request.

Usage in route handlers:
    @router.get("/notes")
    def list_notes(store: NoteStore = Depends(get_note_store)):
        ...

Tests swap the store by passing their own instance to create_app().
"""

from fastapi import Request

from memonotes.services.note_store import NoteStore


def get_note_store(request: Request) -> NoteStore:
    """Return the NoteStore owned by the application serving this request."""
    return request.app.state.note_store