# app/application/use_cases/__init__.py (async version)

"""
Application service module.

This package contains the application services that implement the business logic
of the application, organized according to functional domains.
"""

from app.application.use_cases.client_use_cases import ClientRegistryService

__all__ = [
    "ClientRegistryService",
]
