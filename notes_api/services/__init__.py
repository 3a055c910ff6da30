# Services package init
"""
Notes API — Services Layer
===========================

What:  Business logic sitting between routes (HTTP) and storage.
How:   NoteService receives its NoteStore at construction; create_app()
       builds one of each and parks them on app.state, and routes reach
       the service through the get_note_service dependency.

Service Inventory:
    - NoteService: validate → assign id/timestamps → store → Note
"""
