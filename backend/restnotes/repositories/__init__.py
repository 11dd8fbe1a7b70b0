"""
RESTful Notes — Entity Store
============================

One repository per entity, all sharing the capability set
{create, find_by_id, find_all, save, delete, delete_all}.
"""

from restnotes.repositories.base import Repository
from restnotes.repositories.note_repository import NoteRepository
from restnotes.repositories.tag_repository import TagRepository

__all__ = ["Repository", "NoteRepository", "TagRepository"]
