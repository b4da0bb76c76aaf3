from decimal import Decimal

from lumen_tools.domain import (
    AccountQueryResult,
    BalanceLine,
    BalanceSummary,
    CreatedAccount,
    PaymentBatchResult,
    PaymentOutcome,
)
from lumen_tools.stellar.display_commands import (
    format_account_result,
    format_amount,
    format_balance_summary,
    format_created_accounts,
    format_payment_report,
)
from lumen_tools.stellar.balance_report import build_query_result
from tests.fakes import make_snapshot

ADDRESS = "GACKTN5DAZGWXRWB2WLM6OPBDHAMT6SJNGLJZPQMEZBUR4JUGBX2UK7V"


def test_format_amount_seven_decimals():
    assert format_amount(Decimal("98")) == "98.0000000"
    assert format_amount(Decimal("-1.5")) == "-1.5000000"


def test_account_result_lines():
    usdc = BalanceLine(asset_type="credit_alphanum4", amount=Decimal("12.5"), asset_code="USDC",
                       issuer="GA5ZSEJYB37JRC5AVCIA5MOP4RHTM335X2KGX3IHOJAPP5RE34K4KZVN")
    result = AccountQueryResult(index=1, account_id=ADDRESS, success=True, native_amount=Decimal("100"),
                                available=Decimal("98"), total_reserve=Decimal("2"), trustline_count=1,
                                sequence=42, subentry_count=3, trustlines=(usdc,))

    text = "\n".join(format_account_result(result, 2))

    assert "Account 1/2: GACK..UK7V" in text
    assert "Available:   98.0000000 XLM" in text
    assert "Locked:      2.0000000 XLM" in text
    assert "Sequence:    42" in text
    assert "USDC: 12.5 (issuer GA5Z..KZVN)" in text
    assert "WARNING" not in text


def test_negative_available_flagged():
    result = build_query_result(1, make_snapshot(ADDRESS, native="1", subentry_count=4))

    assert result.reserve.is_underfunded
    assert any("WARNING" in line for line in format_account_result(result, 1))


def test_funded_account_not_flagged():
    result = build_query_result(1, make_snapshot(ADDRESS, native="2.5", subentry_count=4))

    assert result.available == Decimal("0")
    assert not any("WARNING" in line for line in format_account_result(result, 1))


def test_failed_account_lines():
    result = AccountQueryResult.failed(2, ADDRESS, "account not found", "NotFound")
    text = "\n".join(format_account_result(result, 2))
    assert "ERROR [NotFound]: account not found" in text


def test_summary_without_successes_has_no_totals():
    text = "\n".join(format_balance_summary(BalanceSummary(failure_count=2)))
    assert "Failed:    2" in text
    assert "Total XLM" not in text


def test_summary_totals():
    summary = BalanceSummary(success_count=1, failure_count=1, total_native=Decimal("50"),
                             total_available=Decimal("49.5"), total_reserve=Decimal("0.5"))
    text = "\n".join(format_balance_summary(summary))
    assert "Total available:  49.5000000 XLM" in text


def test_payment_report():
    batch = PaymentBatchResult(
        amount=Decimal("2"),
        success_count=1,
        results=[
            PaymentOutcome(index=1, destination=ADDRESS, memo="Payment 1", success=True, hash="abc", ledger=9,
                           source_balance=Decimal("100")),
            PaymentOutcome(index=2, destination=ADDRESS, memo="Payment 2", success=False,
                           error="op_no_destination", error_kind="SubmissionRejected"),
        ],
    )
    text = "\n".join(format_payment_report(batch))
    assert "Succeeded: 1/2" in text
    assert "Failed:    1/2" in text
    assert "Total sent: 2.0000000 XLM" in text
    assert "Hash: abc" in text
    assert "Source balance before: 100.0000000 XLM" in text
    assert "Error [SubmissionRejected]: op_no_destination" in text


def test_created_accounts_report():
    accounts = [
        CreatedAccount(index=1, public_key=ADDRESS, secret="SSECRET", funded=True,
                       balance=Decimal("10000"), hash="h1"),
        CreatedAccount(index=2, public_key=ADDRESS, secret="SSECRET2", error="refused"),
    ]
    text = "\n".join(format_created_accounts(accounts))
    assert "Secret key: SSECRET" in text
    assert "Status: funded" in text
    assert "Status: not funded" in text
    assert "Funded 1/2" in text
