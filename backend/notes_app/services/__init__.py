# Services package init
"""
Notes App Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and the note store.
How:   Services receive their repository at construction time; main.py builds
       one NoteService per application and routes look it up on app.state.

Service Inventory:
    - NoteService: id/timestamp assignment, normalisation, not-found translation
"""
