import asyncio
from dataclasses import replace
from decimal import Decimal

import pytest

from storecart import cart as K
from storecart import order as O
from storecart._errors import NetworkError, ValidationErrorKind
from storecart.cart import Cart, CartLine

from tests.conftest import APPLE, MILK, FREEBIE, run, unwrap_ok, unwrap_err


@pytest.fixture
def filled(catalog) -> Cart:
    return K.increment(K.increment(K.EMPTY_CART, APPLE), MILK)


# ═══════════════════════════════════════════════════════════════════════════════
# validate()
# ═══════════════════════════════════════════════════════════════════════════════


def test_validate_builds_payload(catalog, filled):
    payload = unwrap_ok(O.validate(catalog, filled, mobile="123"))

    assert payload.store_id == "store-1"
    assert payload.lines == filled.lines
    assert payload.total == Decimal("80") + Decimal("53.2")
    assert payload.status == "Pending"
    assert payload.mobile == "123"


def test_validate_missing_store(filled, catalog):
    assert unwrap_err(O.validate(None, filled, mobile="1")).kind is ValidationErrorKind.MISSING_STORE

    anonymous = replace(catalog, store=replace(catalog.store, id=""))
    assert unwrap_err(O.validate(anonymous, filled, mobile="1")).kind is ValidationErrorKind.MISSING_STORE


def test_validate_empty_cart(catalog):
    error = unwrap_err(O.validate(catalog, K.EMPTY_CART, mobile="1"))

    assert error.kind is ValidationErrorKind.EMPTY_CART
    assert error.message == "Cart is empty"


def test_validate_zero_quantity_line(catalog):
    line = CartLine(APPLE.id, 0, Decimal("100"), Decimal("20"), Decimal("80"))

    error = unwrap_err(O.validate(catalog, Cart(lines=(line,)), mobile="1"))
    assert error.kind is ValidationErrorKind.INVALID_QUANTITY


def test_validate_zero_total(catalog):
    c = K.increment(K.EMPTY_CART, FREEBIE)

    error = unwrap_err(O.validate(catalog, c, mobile="1"))
    assert error.kind is ValidationErrorKind.INVALID_TOTAL


# ═══════════════════════════════════════════════════════════════════════════════
# OrderSubmitter
# ═══════════════════════════════════════════════════════════════════════════════


def test_submit_success_sends_one_request(backend, catalog, filled):
    phases: list[O.SubmitPhase] = []
    submitter = O.OrderSubmitter(api=backend, mobile="123", on_phase=phases.append)

    order = unwrap_ok(run(submitter.submit(catalog, filled)))

    assert order.id == "ord_1"
    assert order.total == filled.discounted_total
    assert len(backend.order_calls) == 1
    assert phases == [
        O.SubmitPhase.VALIDATING,
        O.SubmitPhase.SUBMITTING,
        O.SubmitPhase.SUCCEEDED,
        O.SubmitPhase.IDLE,
    ]
    assert submitter.retained is None


def test_validation_failure_sends_nothing(backend, catalog):
    phases: list[O.SubmitPhase] = []
    submitter = O.OrderSubmitter(api=backend, mobile="123", on_phase=phases.append)

    error = unwrap_err(run(submitter.submit(catalog, K.EMPTY_CART)))

    assert error.kind is ValidationErrorKind.EMPTY_CART
    assert backend.order_calls == []
    assert phases == [
        O.SubmitPhase.VALIDATING,
        O.SubmitPhase.FAILED,
        O.SubmitPhase.RETRY_PENDING,
    ]
    assert submitter.retained is None


def test_concurrent_submits_issue_exactly_one_request(backend, catalog, filled):
    submitter = O.OrderSubmitter(api=backend, mobile="123")

    async def scenario():
        backend.gate = asyncio.Event()
        first = asyncio.create_task(submitter.submit(catalog, filled))
        await asyncio.sleep(0)
        assert submitter.in_flight
        second = await submitter.submit(catalog, filled)
        also_ignored = await submitter.retry(catalog, filled)
        backend.gate.set()
        return await first, second, also_ignored

    first, second, also_ignored = run(scenario())

    assert second is None
    assert also_ignored is None
    unwrap_ok(first)
    assert len(backend.order_calls) == 1


def test_retry_resends_retained_payload(backend, catalog, filled):
    backend.order_failures = 1
    submitter = O.OrderSubmitter(api=backend, mobile="123")

    error = unwrap_err(run(submitter.submit(catalog, filled)))
    assert isinstance(error, NetworkError)
    assert submitter.phase is O.SubmitPhase.RETRY_PENDING
    assert submitter.retained is backend.order_calls[0]

    # Cart and catalog moved on; retry must not read them.
    grown = K.increment(filled, APPLE)
    order = unwrap_ok(run(submitter.retry(None, grown)))

    assert len(backend.order_calls) == 2
    assert backend.order_calls[1] is backend.order_calls[0]
    assert order.total == filled.discounted_total
    assert submitter.phase is O.SubmitPhase.IDLE


def test_retry_after_validation_failure_revalidates(backend, catalog, filled):
    submitter = O.OrderSubmitter(api=backend, mobile="123")

    unwrap_err(run(submitter.submit(catalog, K.EMPTY_CART)))
    unwrap_ok(run(submitter.retry(catalog, filled)))

    assert backend.order_calls[0].lines == filled.lines


def test_cancel_drops_payload_and_returns_idle(backend, catalog, filled):
    backend.order_failures = 1
    submitter = O.OrderSubmitter(api=backend, mobile="123")
    unwrap_err(run(submitter.submit(catalog, filled)))

    submitter.cancel()

    assert submitter.phase is O.SubmitPhase.IDLE
    assert submitter.retained is None
    assert submitter.last_error is None
    assert len(backend.order_calls) == 1


def test_no_automatic_retry(backend, catalog, filled):
    backend.order_failures = 5
    submitter = O.OrderSubmitter(api=backend, mobile="123")

    unwrap_err(run(submitter.submit(catalog, filled)))

    assert len(backend.order_calls) == 1
