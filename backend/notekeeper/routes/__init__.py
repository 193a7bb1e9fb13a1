# Routes package init
"""
NoteKeeper Backend: API Routes Package
========================================

Route Inventory:
    - write.py:   POST   /write             (create a note from form fields)
    - notes.py:   GET    /notes             (list all notes)
                  GET    /notes/{name}      (note text)
                  PUT    /notes/{name}      (replace note text)
                  DELETE /notes/{name}      (remove note)
    - pages.py:   GET    /                  (redirect to the upload form)
                  GET    /UploadForm.html   (note creation form)
    - health.py:  GET    /health            (service health check)

Design Principle:
    Routes are THIN. They extract data from the request, call NoteStore
    and shape the response. Error mapping happens in the global handlers.
"""
