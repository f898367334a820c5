"""Client facade."""

from .parcl_client import ParclClient

__all__ = ["ParclClient"]
