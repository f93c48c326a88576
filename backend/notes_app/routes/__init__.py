# Routes package init
"""
Notes App Backend — API Routes Package
========================================

Route Inventory:
    - health.py:  GET /                       (liveness)
    - notes.py:   GET/POST /api/notes
                  GET/PUT/DELETE /api/notes/{id}
    - deps.py:    get_note_service dependency

Design Principle:
    Routes are THIN: read the request, call the service, shape the response.
"""
