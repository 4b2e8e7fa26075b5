# Routes package init
"""
NoteKeeper Backend - API Routes Package
=========================================

Route Inventory:
    - notes.py:   GET/POST            /note
                  GET/PATCH/DELETE    /note/{note_id}
    - health.py:  GET                 /health

Routes stay thin: pull the path id and body off the request, call
NoteService, wrap the result in the response envelope.
"""
