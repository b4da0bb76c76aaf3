import pytest
from decimal import Decimal

from lumen_tools.domain import AccountQueryResult
from lumen_tools.stellar.balance_report import run_balance_batch, summarize_balances
from lumen_tools.stellar.exceptions import AccountNotFound, TransportError
from tests.fakes import FakeLedger, make_snapshot


@pytest.mark.asyncio
async def test_results_keep_input_order(no_delay):
    ledger = FakeLedger({"A": make_snapshot("A"), "C": make_snapshot("C")})

    batch = await run_balance_batch(["A", "B", "C"], ledger.load_account, no_delay)

    assert [r.account_id for r in batch.results] == ["A", "B", "C"]
    assert [r.index for r in batch.results] == [1, 2, 3]
    assert [r.success for r in batch.results] == [True, False, True]
    assert batch.summary.failure_count == 1
    assert batch.summary.success_count == 2


@pytest.mark.asyncio
async def test_success_then_not_found(no_delay):
    ledger = FakeLedger({"A": make_snapshot("A", native="50", subentry_count=0)})

    batch = await run_balance_batch(["A", "B"], ledger.load_account, no_delay)

    first, second = batch.results
    assert first.success
    assert first.available == Decimal("49.5")
    assert first.total_reserve == Decimal("0.5")
    assert not second.success
    assert second.error_kind == "NotFound"
    assert second.error
    assert batch.summary.success_count == 1
    assert batch.summary.failure_count == 1
    assert batch.summary.total_available == Decimal("49.5")


@pytest.mark.asyncio
async def test_query_result_fields(no_delay):
    snapshot = make_snapshot("A", native="100.0000000", subentry_count=3, sequence=987654321,
                             trustlines=[("USDC", "12.5", "GISSUER"), ("EURMTL", "1", "GISSUER2")])
    ledger = FakeLedger({"A": snapshot})

    batch = await run_balance_batch(["A"], ledger.load_account, no_delay)

    result = batch.results[0]
    assert result.native_amount == Decimal("100")
    assert result.total_reserve == Decimal("2")
    assert result.available == Decimal("98")
    assert result.trustline_count == 2
    assert result.sequence == 987654321
    assert result.subentry_count == 3
    assert [t.asset_code for t in result.trustlines] == ["USDC", "EURMTL"]


@pytest.mark.asyncio
async def test_account_without_native_balance_counts_as_zero(no_delay):
    ledger = FakeLedger({"A": make_snapshot("A", native=None, subentry_count=1)})

    batch = await run_balance_batch(["A"], ledger.load_account, no_delay)

    assert batch.results[0].native_amount == Decimal("0")
    assert batch.results[0].available == Decimal("-1")


@pytest.mark.asyncio
async def test_delay_between_items_only(events, no_delay):
    ledger = FakeLedger({"A": make_snapshot("A"), "C": make_snapshot("C")}, events)

    await run_balance_batch(["A", "B", "C"], ledger.load_account, no_delay)

    assert no_delay.calls == [500, 500]
    assert events == [
        ("load", "A"), ("delay", 500),
        ("load", "B"), ("delay", 500),
        ("load", "C"),
    ]


@pytest.mark.asyncio
async def test_single_account_no_delay(no_delay):
    ledger = FakeLedger({"A": make_snapshot("A")})
    await run_balance_batch(["A"], ledger.load_account, no_delay)
    assert no_delay.calls == []


@pytest.mark.asyncio
async def test_all_failed_batch_has_zero_totals(no_delay):
    ledger = FakeLedger({"B": TransportError("horizon unreachable")})

    batch = await run_balance_batch(["A", "B"], ledger.load_account, no_delay)

    assert batch.summary.success_count == 0
    assert batch.summary.failure_count == 2
    assert batch.summary.total_available == Decimal("0")
    assert batch.summary.total_native == Decimal("0")
    assert batch.summary.total_trustlines == 0
    assert batch.results[1].error_kind == "Transport"
    assert batch.results[1].error == "horizon unreachable"


@pytest.mark.asyncio
async def test_unexpected_error_is_recorded(no_delay):
    ledger = FakeLedger({"A": RuntimeError("boom"), "B": make_snapshot("B")})

    batch = await run_balance_batch(["A", "B"], ledger.load_account, no_delay)

    assert batch.results[0].error_kind == "RuntimeError"
    assert "boom" in batch.results[0].error
    assert batch.results[1].success


@pytest.mark.asyncio
async def test_empty_batch(no_delay):
    ledger = FakeLedger({})
    batch = await run_balance_batch([], ledger.load_account, no_delay)
    assert batch.results == []
    assert batch.summary.total_count == 0


def test_summary_sums_successful_entries_only():
    results = [
        AccountQueryResult(index=1, account_id="A", success=True, native_amount=Decimal("11"),
                           available=Decimal("10.0"), total_reserve=Decimal("1"), trustline_count=1),
        AccountQueryResult.failed(2, "B", "account not found", AccountNotFound.kind),
        AccountQueryResult(index=3, account_id="C", success=True, native_amount=Decimal("6"),
                           available=Decimal("5.0"), total_reserve=Decimal("1"), trustline_count=2),
    ]

    summary = summarize_balances(results)

    assert summary.total_available == Decimal("15.0")
    assert summary.total_native == Decimal("17")
    assert summary.total_reserve == Decimal("2")
    assert summary.total_trustlines == 3
    assert summary.success_count == 2
    assert summary.failure_count == 1
