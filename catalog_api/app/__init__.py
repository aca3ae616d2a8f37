"""
Application package initializer.

The catalog service is organised into layers: ``stores`` talk to
SQLite, ``services`` hold the business rules, ``schemas`` define the
request and response shapes and ``api`` exposes everything over HTTP
under ``/api/v1``.
"""

from .main import app  # noqa: F401
