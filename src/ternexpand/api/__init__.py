"""HTTP API package for ternexpand (optional).

Install with `pip install 'ternexpand[api]'` to use the FastAPI server.
"""

from ternexpand.api.app import create_app

__all__ = ["create_app"]
