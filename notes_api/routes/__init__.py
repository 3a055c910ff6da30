# Routes package init
"""
Notes API — API Routes Package
===============================

Route Inventory:
    - notes.py:   POST/GET /notes/, GET/PUT/DELETE /notes/{id}
    - health.py:  GET / and GET /health

Routes stay thin: read the request, call NoteService, shape the response.
"""
