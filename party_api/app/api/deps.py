"""Shared dependencies for the endpoint modules."""

from fastapi import Request

from party_api.app.services.visitor_store import VisitorStore


def get_store(request: Request) -> VisitorStore:
    """Return the store the application was built with."""
    return request.app.state.store


def client_address(request: Request) -> str:
    """Network origin of the caller.

    A reverse proxy's ``X-Forwarded-For`` header wins over the peer
    socket, which is rendered as ``host:port``.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded
    if request.client is None:
        return "unknown"
    return f"{request.client.host}:{request.client.port}"
