"""
Organizer endpoints.

Every route in this module requires the static admin key (see
``core.security.require_admin``).  Organizers see the full visitor
records, including email and free text, and may delete registrations.
"""

from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from party_api.app.api.deps import get_store
from party_api.app.core.errors import NotFoundError
from party_api.app.core.security import require_admin
from party_api.app.schemas.visitor import VisitorRead
from party_api.app.services.visitor_store import VisitorStore

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/visitors", response_model=List[VisitorRead])
def list_visitors(store: VisitorStore = Depends(get_store)) -> List[VisitorRead]:
    """Return every visitor with all fields, oldest first."""
    return store.list_admin()


@router.delete(
    "/visitors/{visitor_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_visitor(
    visitor_id: int = Path(..., description="ID of the visitor to delete"),
    store: VisitorStore = Depends(get_store),
) -> Response:
    """Delete a visitor.  Returns 404 if no visitor has that id."""
    if not store.delete(visitor_id):
        raise NotFoundError()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
