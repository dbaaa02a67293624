from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar

from . import serialization
from .exceptions import NotFoundError
from .serialization import declared_id
from .transport import error_for

if TYPE_CHECKING:
    from .collection import Collection

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Document(Generic[T]):
    """Handle addressing one document inside a collection.

    The handle stores only the document identifier. The database and
    collection names are read through the parent :class:`Collection` on
    every call, so renames performed on the parents are picked up here.
    """

    def __init__(self, collection: Collection, id: str) -> None:
        self._collection = collection
        self._id = id

    def __repr__(self) -> str:
        return f"Document(id={self._id!r}, collection={self._collection.name!r})"

    @property
    def id(self) -> str:
        return self._id

    def get_id(self) -> str:
        return self._id

    @property
    def collection(self) -> Collection:
        return self._collection

    @property
    def path(self) -> str:
        return self._collection.child_path("documents", self._id)

    async def safe_load(self) -> Optional[T]:
        """Fetch the document body, returning ``None`` when it does not exist."""
        executor = self._collection.executor
        response = await executor.send("GET", self.path, auth=self._collection.auth)
        if response.status_code == 404:
            logger.debug("Document %s not found", self._id)
            return None
        if not response.is_success:
            raise error_for(response, "fetching document")
        return serialization.decode(response.content)["data"]

    async def load(self) -> T:
        body = await self.safe_load()
        if body is None:
            raise NotFoundError(self._id)
        return body

    async def remove(self) -> None:
        await self._collection.executor.call(
            "DELETE",
            self.path,
            operation="deleting document",
            auth=self._collection.auth,
            expect_body=False,
        )

    async def set(self, body: T) -> None:
        """Write ``body`` and adopt the identifier the backend answers with.

        When the payload declares an ``id`` other than the current one the
        document stored under the current id is deleted first, since the
        write will land under the new id.
        """
        new_id: Any = declared_id(body)
        if new_id is not None and new_id != self._id:
            logger.debug("Document %s is being re-keyed to %s", self._id, new_id)
            await self.remove()
        self._id = await self._collection.write_document(body)
