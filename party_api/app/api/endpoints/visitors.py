"""
Public visitor endpoints.

Anyone may register for the party and look at who else is coming.  The
public list only carries each visitor's nick and group; contact details
and free text are reserved for the organizer routes in ``admin``.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, Response, status

from party_api.app.api.deps import client_address, get_store
from party_api.app.schemas.visitor import VisitorPublic, validate_registration
from party_api.app.services.visitor_store import VisitorStore

router = APIRouter()


@router.get("/visitors", response_model=List[VisitorPublic])
def list_visitors(store: VisitorStore = Depends(get_store)) -> List[VisitorPublic]:
    """Return nick and group of every registered visitor, oldest first."""
    return store.list_public()


@router.post("/register", status_code=status.HTTP_201_CREATED, response_class=Response)
def register(
    request: Request,
    payload: Any = Body(None),
    store: VisitorStore = Depends(get_store),
) -> Response:
    """Register a visitor.

    Returns 201 with an empty body.  A missing or blank nick, non-string
    optional fields or an already registered nick yield 400.
    """
    visitor = validate_registration(payload)
    store.create(
        visitor.nick,
        visitor.group,
        visitor.email,
        visitor.extra,
        ip=client_address(request),
    )
    return Response(status_code=status.HTTP_201_CREATED)
