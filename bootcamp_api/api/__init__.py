"""
API layer for the Bootcamp API.

Exposes HTTP endpoints under /api/v1 (auth, bootcamps) and the global
error handlers that shape every failure into the common JSON envelope.
"""
