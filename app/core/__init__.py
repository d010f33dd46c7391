# app/core/__init__.py

from app.core.container import RegistryContainer

__all__ = ["RegistryContainer"]
