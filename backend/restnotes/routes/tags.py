"""
RESTful Notes — Tags Route Handlers
===================================

What:  The /tags collection, individual tags, and the notes carrying a tag.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from restnotes import assemblers, links
from restnotes.database import get_db_session
from restnotes.routes import HALJSONResponse
from restnotes.schemas.hal import ErrorResponse
from restnotes.schemas.note import NoteCollectionModel
from restnotes.schemas.tag import TagCollectionModel, TagInput, TagModel, TagPatchInput
from restnotes.services.tag_service import tag_service

router = APIRouter(prefix="/tags", tags=["Tags"])


@router.get(
    "",
    response_model=TagCollectionModel,
    response_class=HALJSONResponse,
    summary="List all tags",
)
async def list_tags(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> TagCollectionModel:
    base_url = str(request.base_url)
    tags = await tag_service.list_tags(db)
    return assemblers.tag_collection(tags, base_url, links.collection_uri(base_url, links.TAGS))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        201: {"description": "Tag created; its URI is in the Location header"},
        400: {"description": "Blank name", "model": ErrorResponse},
    },
    summary="Create a tag",
)
async def create_tag(
    tag_input: TagInput,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    tag = await tag_service.create_tag(db, tag_input)
    location = links.resource_uri(str(request.base_url), links.TAGS, tag.id)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": location})


@router.get(
    "/{tag_id}",
    response_model=TagModel,
    response_class=HALJSONResponse,
    responses={404: {"description": "Tag not found", "model": ErrorResponse}},
    summary="Get a single tag",
)
async def get_tag(
    tag_id: UUID,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> TagModel:
    tag = await tag_service.get_tag(db, tag_id)
    return assemblers.tag_representation(tag, str(request.base_url))


@router.patch(
    "/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={
        400: {"description": "Blank name", "model": ErrorResponse},
        404: {"description": "Tag not found", "model": ErrorResponse},
    },
    summary="Update a tag",
)
async def patch_tag(
    tag_id: UUID,
    patch: TagPatchInput,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await tag_service.patch_tag(db, tag_id, patch)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{tag_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={404: {"description": "Tag not found", "model": ErrorResponse}},
    summary="Delete a tag",
    description="Deletes the tag and removes it from every note that carried it.",
)
async def delete_tag(
    tag_id: UUID,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await tag_service.delete_tag(db, tag_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{tag_id}/notes",
    response_model=NoteCollectionModel,
    response_class=HALJSONResponse,
    responses={404: {"description": "Tag not found", "model": ErrorResponse}},
    summary="List the notes that have a tag",
)
async def get_tagged_notes(
    tag_id: UUID,
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> NoteCollectionModel:
    base_url = str(request.base_url)
    notes = await tag_service.get_tagged_notes(db, tag_id)
    return assemblers.note_collection(
        notes, base_url, links.relation_uri(base_url, links.TAGS, tag_id, links.REL_TAGGED_NOTES)
    )
