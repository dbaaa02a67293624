from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, TypeVar

from .document import Document
from .query import CriterionLike, encode_criteria
from .transport import RequestExecutor
from .utils import join_path

if TYPE_CHECKING:
    from .database import Database

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Collection:
    """Handle addressing one named collection inside a database.

    Parameters
    ----------
    database:
        Parent handle. Its current name is looked up on every request.
    name:
        Collection name. Updated in place by :meth:`edit`.

    Documents issued by this handle keep a reference back to it, so a
    successful :meth:`edit` is visible to them immediately.
    """

    def __init__(self, database: Database, name: str) -> None:
        self._database = database
        self._name = name

    def __repr__(self) -> str:
        return f"Collection(name={self._name!r}, database={self._database.name!r})"

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    @property
    def database(self) -> Database:
        return self._database

    @property
    def executor(self) -> RequestExecutor:
        return self._database.executor

    @property
    def auth(self) -> str | None:
        return self._database.auth

    @property
    def path(self) -> str:
        return self.child_path()

    def child_path(self, *segments: Any) -> str:
        return join_path(self._database.name, "collections", self._name, *segments)

    # Collection lifecycle ----------------------------------------------
    async def remove(self) -> None:
        await self.executor.call(
            "DELETE",
            self.path,
            operation="deleting a collection",
            auth=self.auth,
            expect_body=False,
        )

    async def edit(self, new_name: str) -> None:
        """Rename the collection remotely, then adopt ``new_name`` locally."""
        await self.executor.call(
            "PUT",
            self.path,
            operation="editing a collection",
            auth=self.auth,
            body={"name": new_name},
            expect_body=False,
        )
        logger.debug("Collection %s renamed to %s", self._name, new_name)
        self._name = new_name

    async def exists(self) -> bool:
        response = await self.executor.send("GET", self.path, auth=self.auth)
        return response.is_success

    # Documents ---------------------------------------------------------
    async def list_documents(self) -> List[str]:
        # The backend serves document listings from the collections route.
        payload = await self.executor.call(
            "GET",
            join_path(self._database.name, "collections"),
            operation="listing documents",
            auth=self.auth,
        )
        return payload["data"]

    def get_document(self, id: str) -> Document[Any]:
        return Document(self, id)

    async def add_document(self, body: T) -> Document[T]:
        id = await self.write_document(body)
        return Document(self, id)

    async def write_document(self, body: Any) -> str:
        """POST ``body`` to the upsert endpoint and return the stored id."""
        payload = await self.executor.call(
            "POST",
            self.child_path("setDocument"),
            operation="setting document",
            auth=self.auth,
            body=body,
        )
        return payload["data"]

    # Queries -----------------------------------------------------------
    async def find_one_document(
        self, key: str, values: Iterable[CriterionLike]
    ) -> Optional[str]:
        payload = await self._find(
            "findOneDocument", key, values, operation="looking for a document"
        )
        return payload["data"]

    async def find_many_documents(
        self, key: str, values: Iterable[CriterionLike]
    ) -> List[str]:
        payload = await self._find(
            "findManyDocuments", key, values, operation="looking for documents"
        )
        return payload["data"]

    async def _find(
        self, endpoint: str, key: str, values: Iterable[CriterionLike], *, operation: str
    ) -> Any:
        return await self.executor.call(
            "POST",
            self.child_path(endpoint),
            operation=operation,
            auth=self.auth,
            body={"key": key, "values": encode_criteria(values)},
        )
