"""Mini README: Interactive interfaces for vendingsim.

Exports the FastAPI application factory that powers the browser control
panel and the icon lookup used to render selections.
"""

from .icons import icon_path
from .web_app import create_application

__all__ = ["create_application", "icon_path"]
