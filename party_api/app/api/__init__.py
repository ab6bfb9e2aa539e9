"""
API package containing the routers.

``router`` aggregates the public and organizer endpoints; the endpoint
modules themselves live in ``endpoints``.
"""
