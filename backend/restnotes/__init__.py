"""
RESTful Notes — Application Package
===================================

What: A hypermedia REST API for notes and the tags attached to them.
Who:  Imported by uvicorn (`restnotes.main:app`), pytest, and every module
      through `from restnotes.<module> import ...`.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, status codes
    ├─────────────────────────────────────┤
    │   Services + Assemblers (Core)      │  ← create/patch rules, HAL links
    ├─────────────────────────────────────┤
    │   Repositories + Validation         │  ← entity store, violations
    ├─────────────────────────────────────┤
    │  Models & Schemas (Data)            │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
