from __future__ import annotations

import logging
from typing import List

from .collection import Collection
from .models import DatabaseUsage
from .transport import RequestExecutor
from .utils import join_path

logger = logging.getLogger(__name__)


class Database:
    """Handle addressing one named database on the backend.

    Parameters
    ----------
    executor:
        Shared request executor bound to the backend address.
    name:
        Database name. Updated in place by :meth:`edit`.
    auth:
        Credential sent with every request issued through this handle and
        the collections and documents it hands out.
    """

    def __init__(self, executor: RequestExecutor, name: str, *, auth: str | None = None) -> None:
        self.executor = executor
        self.auth = auth
        self._name = name

    def __repr__(self) -> str:
        return f"Database(name={self._name!r}, host={self.executor.host!r})"

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return join_path(self._name)

    # Database lifecycle ------------------------------------------------
    async def remove(self) -> None:
        await self.executor.call(
            "DELETE",
            self.path,
            operation="deleting a database",
            auth=self.auth,
            expect_body=False,
        )

    async def edit(self, new_name: str, new_auth: str | None = None) -> None:
        """Rename the database and replace its credential remotely.

        Only the name is adopted locally; this handle keeps sending the
        credential it was created with.
        """
        await self.executor.call(
            "PUT",
            self.path,
            operation="editing a database",
            auth=self.auth,
            body={"name": new_name, "auth": new_auth},
            expect_body=False,
        )
        logger.debug("Database %s renamed to %s", self._name, new_name)
        self._name = new_name

    async def get_usage(self) -> DatabaseUsage:
        payload = await self.executor.call(
            "GET",
            self.path,
            operation="fetching database usage",
            auth=self.auth,
        )
        return DatabaseUsage.model_validate(payload)

    async def exists(self) -> bool:
        """Return whether :meth:`get_usage` succeeds.

        Any failure counts as absence, including transport errors.
        """
        try:
            await self.get_usage()
        except Exception as exc:
            logger.debug("Database %s treated as missing: %r", self._name, exc)
            return False
        return True

    # Collections -------------------------------------------------------
    async def list_collections(self) -> List[str]:
        payload = await self.executor.call(
            "GET",
            join_path(self._name, "collections"),
            operation="listing collections",
            auth=self.auth,
        )
        return payload["data"]

    def get_collection(self, name: str) -> Collection:
        return Collection(self, name)

    async def add_collection(self, name: str) -> Collection:
        await self.executor.call(
            "POST",
            join_path(self._name, "collections"),
            operation="adding a collection",
            auth=self.auth,
            body={"name": name},
            expect_body=False,
        )
        return Collection(self, name)
