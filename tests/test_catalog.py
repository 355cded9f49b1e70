import asyncio

from storecart import catalog as C
from storecart._errors import InvalidIdentifier, NetworkError, NotFound

from tests.conftest import APPLE, run, unwrap_ok, unwrap_err


def test_identifier_is_trimmed():
    assert unwrap_ok(C.normalize_identifier("  8901234\n")) == "8901234"


def test_blank_identifier_rejected_without_request(backend):
    for raw in ("", "   ", "\t\n"):
        error = unwrap_err(C.CatalogStore.resolve(raw, backend))
        assert isinstance(error, InvalidIdentifier)
        assert error.message == "Please enter a valid Barcode ID."

    assert backend.catalog_calls == []


def test_fetch_loads_once_then_reuses(backend, catalog):
    store = unwrap_ok(C.CatalogStore.resolve(" 8901234 ", backend))
    assert not store.loaded

    first = unwrap_ok(run(store.fetch()))
    second = unwrap_ok(run(store.fetch()))

    assert first is catalog
    assert second is first
    assert store.loaded
    assert backend.catalog_calls == ["8901234"]


def test_fetch_is_lazy(backend):
    store = unwrap_ok(C.CatalogStore.resolve("8901234", backend))

    store.fetch()

    assert backend.catalog_calls == []


def test_unknown_identifier_is_not_found(backend):
    store = unwrap_ok(C.CatalogStore.resolve("0000", backend))

    error = unwrap_err(run(store.fetch()))

    assert error == NotFound("0000")
    assert not store.loaded


def test_failed_fetch_keeps_nothing_and_can_be_repeated(backend, catalog):
    backend.fetch_failures = 1
    store = unwrap_ok(C.CatalogStore.resolve("8901234", backend))

    assert isinstance(unwrap_err(run(store.fetch())), NetworkError)
    assert store.catalog is None

    assert unwrap_ok(run(store.fetch())) is catalog
    assert len(backend.catalog_calls) == 2


def test_catalog_lookup_helpers(catalog):
    assert catalog.item(APPLE.id) is APPLE
    assert catalog.item("nope") is None

    shown = catalog.with_display_quantity(APPLE.id, 3)
    assert shown.item(APPLE.id).display_quantity == 3
    assert catalog.item(APPLE.id).display_quantity == 0
    assert shown.with_display_quantity(APPLE.id, -1).item(APPLE.id).display_quantity == 0


def test_overlapping_fetches_share_one_request(backend, catalog):
    store = unwrap_ok(C.CatalogStore.resolve("8901234", backend))

    async def scenario():
        return await asyncio.gather(store.fetch(), store.fetch())

    first, second = run(scenario())

    assert unwrap_ok(first) is catalog
    assert unwrap_ok(second) is catalog
    assert backend.catalog_calls == ["8901234"]
    assert store.pending is None


def test_overlapping_fetches_share_a_failure_then_retry(backend, catalog):
    backend.fetch_failures = 1
    store = unwrap_ok(C.CatalogStore.resolve("8901234", backend))

    async def scenario():
        return await asyncio.gather(store.fetch(), store.fetch())

    first, second = run(scenario())

    assert isinstance(unwrap_err(first), NetworkError)
    assert isinstance(unwrap_err(second), NetworkError)
    assert len(backend.catalog_calls) == 1

    assert unwrap_ok(run(store.fetch())) is catalog
    assert len(backend.catalog_calls) == 2
