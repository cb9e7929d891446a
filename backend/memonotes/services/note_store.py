"""
MemoNotes Backend — Note Store
================================

What:  The single source of truth for note existence and content.
How:   A dict mapping name → text, guarded by one threading.Lock that is held
       for the whole of every operation.
Who:   Constructed once by create_app() and injected into route handlers
       through the get_note_store dependency.
When:  Lives for the lifetime of the application; discarded on shutdown.

Per-name state machine:
    Absent  ──create──▶  Present        create while Present → AlreadyExistsError
    Present ──update──▶  Present        update while Absent  → NotFoundError
    Present ──delete──▶  Absent         delete while Absent  → NotFoundError

    A name may cycle between Absent and Present any number of times.

Concurrency:
    FastAPI runs plain `def` handlers in a thread pool, so two requests can
    reach the store at the same time. Each operation runs entirely under the
    lock: of N concurrent create() calls for one name exactly one succeeds,
    and update()/delete() never observe a half-applied mutation.

Validation asymmetry:
    create() rejects an empty name or empty text; update() stores any text
    verbatim, including "". Clients rely on both behaviours.
"""

import logging
import threading
from typing import Dict, List, Optional

from memonotes.exceptions import AlreadyExistsError, NotFoundError, ValidationError
from memonotes.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """
    In-memory note storage with CRUD semantics.

    Responsibilities:
        - create(): insert-if-absent with input validation
        - read() / try_get() / contains(): lookups
        - update(): replace text of an existing note
        - delete(): remove an existing note
        - list(): snapshot of all notes in insertion order

    Listing order is dict insertion order. An update keeps a note in place;
    deleting and re-creating a name moves it to the end.
    """

    def __init__(self) -> None:
        self._notes: Dict[str, str] = {}
        self._lock = threading.Lock()

    def create(self, name: Optional[str], text: Optional[str]) -> Note:
        """
        Insert a new note.

        Args:
            name: Note name, must be non-empty
            text: Note text, must be non-empty

        Returns:
            The stored Note

        Raises:
            ValidationError: name or text is missing or empty
            AlreadyExistsError: a note with this name is already stored
        """
        missing = [
            field for field, value in (("note_name", name), ("note", text))
            if not value
        ]
        if missing:
            raise ValidationError(
                message="Both note_name and note are required and must not be empty",
                context={"fields": missing},
            )

        with self._lock:
            if name in self._notes:
                raise AlreadyExistsError(resource="note", resource_id=name)
            self._notes[name] = text

        logger.info("Note created: %s (%d chars)", name, len(text))
        return Note(name=name, text=text)

    def read(self, name: str) -> str:
        """Return the text of `name` or raise NotFoundError."""
        with self._lock:
            if name in self._notes:
                return self._notes[name]

        logger.debug("Note not found: %s", name)
        raise NotFoundError(resource="note", resource_id=name)

    def try_get(self, name: str) -> Optional[str]:
        """Return the text of `name`, or None when it is absent."""
        with self._lock:
            return self._notes.get(name)

    def contains(self, name: str) -> bool:
        with self._lock:
            return name in self._notes

    def update(self, name: str, text: str) -> Note:
        """
        Replace the text of an existing note.

        Any text is accepted, including the empty string.

        Raises:
            NotFoundError: no note with this name is stored
        """
        with self._lock:
            if name not in self._notes:
                raise NotFoundError(resource="note", resource_id=name)
            self._notes[name] = text

        logger.info("Note updated: %s (%d chars)", name, len(text))
        return Note(name=name, text=text)

    def delete(self, name: str) -> None:
        """
        Remove a note.

        Raises:
            NotFoundError: no note with this name is stored (including a
                           second delete of the same name)
        """
        with self._lock:
            if name not in self._notes:
                raise NotFoundError(resource="note", resource_id=name)
            del self._notes[name]

        logger.info("Note deleted: %s", name)

    def list(self) -> List[Note]:
        """Return a fresh snapshot of every stored note, in insertion order."""
        with self._lock:
            items = list(self._notes.items())
        return [Note(name=name, text=text) for name, text in items]

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)
