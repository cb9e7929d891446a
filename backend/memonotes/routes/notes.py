"""
MemoNotes Backend — Notes Route Handlers
===========================================

What:  CRUD endpoints for notes.
How:   Each handler receives the application's NoteStore through
       Depends(get_note_store) and makes exactly one store call.

Status codes:
    200  read, update, delete, list
    201  create
    400  missing/empty form field, duplicate name, undecodable PUT body
    404  read/update/delete of an unknown name

Handlers that only touch the store are plain `def` functions and run in
FastAPI's thread pool; the store's lock keeps them consistent.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import PlainTextResponse

from memonotes.dependencies import get_note_store
from memonotes.exceptions import ValidationError
from memonotes.schemas.note import ErrorResponse, MessageResponse, NoteItem
from memonotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[NoteItem],
    summary="List all notes",
    description="Returns every stored note as an array of {name, text} objects, in creation order.",
)
def list_notes(store: NoteStore = Depends(get_note_store)) -> List[NoteItem]:
    return [NoteItem.model_validate(note) for note in store.list()]


@router.get(
    "/notes/{name:path}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Note text", "content": {"text/plain": {}}},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Read a note",
    description="Returns the text of the named note as text/plain.",
)
def read_note(name: str, store: NoteStore = Depends(get_note_store)) -> str:
    return store.read(name)


@router.put(
    "/notes/{name:path}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Body is not valid UTF-8", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Replace a note's text",
    description=(
        "The entire raw request body becomes the new text of the named note. "
        "An empty body stores an empty note."
    ),
    openapi_extra={
        "requestBody": {
            "content": {"text/plain": {"schema": {"type": "string"}}},
            "required": False,
        }
    },
)
async def update_note(
    name: str,
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    """
    Replace the text of an existing note.

    The body is read as-is regardless of Content-Type. Unlike POST /write,
    empty text is accepted.
    """
    raw = await request.body()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        raise ValidationError(message="Note text must be valid UTF-8", field="body")

    store.update(name, text)
    return MessageResponse(message="Note updated", name=name)


@router.delete(
    "/notes/{name:path}",
    response_model=MessageResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
def delete_note(name: str, store: NoteStore = Depends(get_note_store)) -> MessageResponse:
    store.delete(name)
    return MessageResponse(message="Note deleted", name=name)


@router.post(
    "/write",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={
        400: {"description": "Missing field or duplicate name", "model": ErrorResponse},
    },
    summary="Create a note",
    description=(
        "Creates a note from the form fields `note_name` and `note` "
        "(multipart/form-data, as submitted by /UploadForm.html). "
        "Both fields must be non-empty and the name must not already exist."
    ),
)
def write_note(
    note_name: Optional[str] = Form(default=None, description="Name of the new note"),
    note: Optional[str] = Form(default=None, description="Text of the new note"),
    store: NoteStore = Depends(get_note_store),
) -> MessageResponse:
    # Fields are optional here so that a missing field reaches the store and
    # is reported as 400 rather than FastAPI's 422.
    created = store.create(note_name, note)
    return MessageResponse(message="Note created", name=created.name)
