"""
Service layer.

The visitor store encapsulates every database query so that the API
handlers never build SQL themselves.
"""
