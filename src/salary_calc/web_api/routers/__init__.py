"""
Routers
=======
Each router handles a specific area of the site.
"""
from . import health, pages, widget

__all__ = ["health", "pages", "widget"]
