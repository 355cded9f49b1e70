"""
Catalog store — one fetch per resolved identifier.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Protocol

from kungfu import LazyCoroResult, Result, Ok, Error

from storecart import lift as L
from storecart._errors import CatalogError, InvalidIdentifier, NetworkError, NotFound
from storecart.catalog._types import Catalog

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog Source Protocol
# ═══════════════════════════════════════════════════════════════════════════════


class CatalogSource(Protocol):
    """
    Where catalogs come from.

    Implemented by storecart.api.StoreApi; tests pass in-memory fakes.
    """

    def get_catalog(self, identifier: str) -> LazyCoroResult[Catalog, NetworkError | NotFound]:
        ...


# ═══════════════════════════════════════════════════════════════════════════════
# Identifier
# ═══════════════════════════════════════════════════════════════════════════════


def normalize_identifier(raw: str) -> Result[str, InvalidIdentifier]:
    """Trim a typed or scanned identifier; blank input is rejected."""
    identifier = raw.strip()
    if not identifier:
        return Error(InvalidIdentifier(raw))
    return Ok(identifier)


# ═══════════════════════════════════════════════════════════════════════════════
# Catalog Store
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class CatalogStore:
    """
    Holds the catalog for one identifier.

    Once a fetch succeeds the catalog is kept and fetch() stops issuing
    requests; there is no background refresh. A failed fetch keeps nothing,
    and the caller decides whether to fetch again. No automatic retry.

    Callers that arrive while a fetch is outstanding await that same fetch
    instead of issuing their own request.
    """

    identifier: str
    source: CatalogSource
    catalog: Catalog | None = None
    pending: asyncio.Task[Result[Catalog, CatalogError]] | None = field(default=None, repr=False)

    @classmethod
    def resolve(cls, raw: str, source: CatalogSource) -> Result[CatalogStore, InvalidIdentifier]:
        match normalize_identifier(raw):
            case Ok(identifier):
                return Ok(cls(identifier=identifier, source=source))
            case Error(e):
                return Error(e)

    @property
    def loaded(self) -> bool:
        return self.catalog is not None

    def fetch(self) -> LazyCoroResult[Catalog, CatalogError]:
        if self.catalog is not None:
            return L.from_result(Ok(self.catalog))

        async def impl() -> Result[Catalog, CatalogError]:
            if self.catalog is not None:
                return Ok(self.catalog)
            if self.pending is None:
                self.pending = asyncio.ensure_future(self._load())
            return await self.pending

        return L.from_result_fn(impl)

    async def _load(self) -> Result[Catalog, CatalogError]:
        try:
            result = await self.source.get_catalog(self.identifier)
        finally:
            self.pending = None

        match result:
            case Ok(catalog):
                self.catalog = catalog
                logger.info(
                    "Loaded store %s: %d categories, %d items",
                    catalog.store.name, len(catalog.categories), len(catalog.items),
                )
                return Ok(catalog)
            case Error(e):
                logger.error("Error fetching store details for %r: %s", self.identifier, e)
                return Error(e)


__all__ = (
    "CatalogSource",
    "normalize_identifier",
    "CatalogStore",
)
