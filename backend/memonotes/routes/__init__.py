# Routes package init
"""
MemoNotes Backend — API Routes Package
=========================================

What:  HTTP route handlers that translate requests into NoteStore calls.

Route Inventory:
    - notes.py:   GET    /notes                (list all notes)
                  GET    /notes/{name}         (read note text)
                  PUT    /notes/{name}         (replace note text, raw body)
                  DELETE /notes/{name}         (delete note)
                  POST   /write                (create note from form fields)
    - pages.py:   GET    /                     (liveness text)
                  GET    /UploadForm.html      (static upload form)
    - health.py:  GET    /health               (service health check)

Routes stay thin: they extract name/text from the request, call the store,
and pick the status code. Store failures propagate as exceptions and are
rendered by the handlers registered in memonotes.main.
"""
