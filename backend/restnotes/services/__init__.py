"""
RESTful Notes — Services Layer
==============================

What:  Business rules sitting between routes (HTTP) and repositories
       (persistence).

Service Inventory:
    - NoteService: note CRUD, tag URI resolution, tag-set replacement
    - TagService:  tag CRUD and the reverse notes collection

Services receive the request's AsyncSession on every call and never commit;
get_db_session commits once the route returns.
"""
