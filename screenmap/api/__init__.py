"""REST API interface for screenmap.

Exposes analysis passes, element lookups and pointer moves over HTTP.
"""

from .app import create_app

__all__ = ["create_app"]
