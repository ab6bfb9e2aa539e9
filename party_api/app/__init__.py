"""
Application package.

The code is split into ``core`` (configuration, logging, errors,
database access and authorization), ``schemas`` (request and response
models), ``services`` (the visitor store) and ``api`` (routers).
``create_app`` in ``main`` wires them together.
"""

from .main import create_app  # noqa: F401
