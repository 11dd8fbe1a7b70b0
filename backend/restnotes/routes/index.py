"""
RESTful Notes — Index Route
===========================

GET / is the only URI a client needs to know; everything else is reached
by following the `notes` and `tags` links it returns.
"""

from fastapi import APIRouter, Request

from restnotes.assemblers import index_representation
from restnotes.routes import HALJSONResponse
from restnotes.schemas.hal import IndexModel

router = APIRouter(tags=["Index"])


@router.get(
    "/",
    response_model=IndexModel,
    response_class=HALJSONResponse,
    summary="API entry point",
    description="Returns links to the Notes and Tags resources.",
)
async def index(request: Request) -> IndexModel:
    return index_representation(str(request.base_url))
