"""
bookgraph
GraphQL service over a fixed catalog of book records
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
