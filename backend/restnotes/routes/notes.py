"""
RESTful Notes — Notes Route Handlers
====================================

What:  The /notes collection, individual notes, and each note's tags.
How:   Delegates to NoteService, assembles HAL representations with links
       rooted at the request's base URL.

Status Codes:
    POST   /notes        201 + Location header, empty body
    PATCH  /notes/{id}   204
    DELETE /notes/{id}   204
    GET    ...           200 application/hal+json
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from restnotes import assemblers, links
from restnotes.database import get_db_session
from restnotes.routes import HALJSONResponse
from restnotes.schemas.hal import ErrorResponse
from restnotes.schemas.note import NoteCollectionModel, NoteInput, NoteModel, NotePatchInput
from restnotes.schemas.tag import TagCollectionModel
from restnotes.services.note_service import note_service

router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get(
    "",
    response_model=NoteCollectionModel,
    response_class=HALJSONResponse,
    summary="List all notes",
)
async def list_notes(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> NoteCollectionModel:
    base_url = str(request.base_url)
    notes = await note_service.list_notes(db)
    return assemblers.note_collection(
        notes, base_url, links.collection_uri(base_url, links.NOTES)
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        201: {"description": "Note created; its URI is in the Location header"},
        400: {"description": "Blank field or unknown tag URI", "model": ErrorResponse},
    },
    summary="Create a note",
    description=(
        "Creates a note from a title, a body and an optional array of tag URIs. "
        "Every tag URI must point at an existing tag."
    ),
)
async def create_note(
    note_input: NoteInput,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    note = await note_service.create_note(db, note_input)
    location = links.resource_uri(str(request.base_url), links.NOTES, note.id)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.get(
    "/{note_id}",
    response_model=NoteModel,
    response_class=HALJSONResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note",
)
async def get_note(
    note_id: UUID,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> NoteModel:
    note = await note_service.get_note(db, note_id)
    return assemblers.note_representation(note, str(request.base_url))


@router.patch(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Blank field or unknown tag URI", "model": ErrorResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update a note",
    description=(
        "Updates only the fields present in the body. A `tags` array replaces "
        "the note's tags entirely; an empty array removes them all."
    ),
)
async def patch_note(
    note_id: UUID,
    patch: NotePatchInput,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.patch_note(db, note_id, patch)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await note_service.delete_note(db, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{note_id}/tags",
    response_model=TagCollectionModel,
    response_class=HALJSONResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="List a note's tags",
)
async def get_note_tags(
    note_id: UUID,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> TagCollectionModel:
    base_url = str(request.base_url)
    tags = await note_service.get_note_tags(db, note_id)
    return assemblers.tag_collection(
        tags, base_url, links.relation_uri(base_url, links.NOTES, note_id, links.REL_NOTE_TAGS)
    )
