from decimal import Decimal

from lumen_tools.domain import BalanceLine, CreatedAccount, PaymentBatchResult, PaymentOutcome


def test_balance_line_labels():
    assert BalanceLine(asset_type="native", amount=Decimal("1")).label == "XLM"
    assert BalanceLine(asset_type="credit_alphanum4", amount=Decimal("1"), asset_code="USDC").label == "USDC"
    pool = BalanceLine(asset_type="liquidity_pool_shares", amount=Decimal("1"), liquidity_pool_id="abcdef0123456789")
    assert pool.label == "POOL:abcdef01"
    assert not pool.is_native


def test_payment_batch_counts():
    batch = PaymentBatchResult(
        amount=Decimal("2.5"),
        success_count=2,
        results=[PaymentOutcome(index=i, destination="G", memo="", success=i != 2) for i in (1, 2, 3)],
    )
    assert batch.failure_count == 1
    assert batch.total_sent == Decimal("5.0")


def test_created_account_hides_secret():
    account = CreatedAccount(index=1, public_key="GPUB", secret="SSECRET")
    assert "SSECRET" not in repr(account)
    assert account.balance == Decimal("0")
