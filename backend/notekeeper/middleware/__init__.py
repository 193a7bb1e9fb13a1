# Middleware package init
"""
NoteKeeper Backend: Middleware Package
========================================

Middleware Chain:
    Request → [Request Context] → [CORS] → Route Handler

    1. Request Context (logging.py): assigns the request ID, logs method,
       path, status and duration once the response is ready
    2. CORS: FastAPI's CORSMiddleware (lets browser clients call the API)

The request ID also reaches every other log line (NoteStore included)
through RequestIDLogFilter in request_id.py.
"""
