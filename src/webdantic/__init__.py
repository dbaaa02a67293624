"""
Async handles for a hierarchical JSON/HTTP document store.

The public API centers around :func:`get_instance`, which returns an
:class:`Instance` bound to a backend address. Instances hand out
:class:`Database` handles, databases hand out :class:`Collection` handles and
collections hand out :class:`Document` handles. Handles only hold the names
and ids needed to address the remote resource.
"""

from .collection import Collection
from .database import Database
from .document import Document
from .exceptions import BackendError, NotFoundError, WebdanticError
from .instance import Instance, get_instance
from .models import DatabaseUsage, RequestCounts
from .query import RegexMatch, StringMatch, parse_criterion

__all__ = (
    "BackendError",
    "Collection",
    "Database",
    "DatabaseUsage",
    "Document",
    "Instance",
    "NotFoundError",
    "RegexMatch",
    "RequestCounts",
    "StringMatch",
    "WebdanticError",
    "get_instance",
    "parse_criterion",
)
