"""
Application package initializer.

The service is organised into small layers: ``schemas`` holds the
payload models, ``services`` the business rules, ``repositories`` the
SQLite persistence and ``api/v1/endpoints`` the HTTP routers.  Shared
plumbing (configuration, database migrations, logging, error types and
field validation) lives in ``core``.
"""

from .main import app, create_app  # noqa: F401
