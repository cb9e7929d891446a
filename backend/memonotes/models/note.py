"""
MemoNotes Backend — Note Record
================================

What:  The in-memory representation of a single note.
How:   A frozen dataclass; the store hands out these records and never
       exposes its internal mapping, so callers cannot mutate stored state.

There is no identifier other than the name and no timestamp: a note is just
a (name, text) pair.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    """A named piece of text."""

    name: str
    text: str
