"""Tests for the in-process ledger repository."""
import pytest

from app.models.invoice import Invoice
from app.models.role import Role
from app.repositories.ledger_repo import LedgerRepository


@pytest.fixture
def repo():
    return LedgerRepository()


class TestLedgerRepository:
    """Storage defaults, the invoice log and the latest-invoice index."""

    def test_defaults_for_unseen_identities(self, repo):
        assert repo.get_role("nobody") is Role.UNREGISTERED
        assert repo.get_balance("nobody") == 0
        assert repo.latest_position("nobody") == 0
        assert repo.get_invoice(0) is None

    def test_log_starts_with_placeholder(self, repo):
        assert len(repo.invoices) == 1
        assert repo.invoices[0].as_tuple() == (0, 0, None, None)
        assert repo.invoice_count() == 0

    def test_append_indexes_both_parties(self, repo):
        first = repo.append_invoice(Invoice.issue("h1", "g1", 10))
        second = repo.append_invoice(Invoice.issue("h2", "g1", 20))

        assert (first, second) == (1, 2)
        assert repo.latest_position("h1") == 1
        assert repo.latest_position("h2") == 2
        assert repo.latest_position("g1") == 2

    def test_balance_cannot_be_set_negative(self, repo):
        with pytest.raises(ValueError):
            repo.set_balance("someone", -1)

    def test_remaining_only_decreases(self, repo):
        position = repo.append_invoice(Invoice.issue("h", "g", 10))
        repo.set_remaining(position, 4)

        with pytest.raises(ValueError):
            repo.set_remaining(position, 5)
        assert repo.invoices[position].remaining_amount == 4


class TestTransactions:
    """Writes inside a failed transaction are undone."""

    def test_commit_keeps_writes(self, repo):
        with repo.transaction():
            repo.set_role("h", Role.HOST)
            repo.set_balance("h", 7)

        assert repo.get_role("h") is Role.HOST
        assert repo.get_balance("h") == 7

    def test_rollback_restores_every_structure(self, repo):
        repo.set_role("h", Role.HOST)
        repo.set_role("g", Role.GUEST)
        repo.set_balance("g", 50)
        position = repo.append_invoice(Invoice.issue("h", "g", 30))

        with pytest.raises(RuntimeError):
            with repo.transaction():
                repo.set_balance("g", 20)
                repo.set_balance("h", 30)
                repo.set_remaining(position, 0)
                repo.append_invoice(Invoice.issue("h", "g", 99))
                repo.set_role("new", Role.GUEST)
                raise RuntimeError("boom")

        assert repo.get_balance("g") == 50
        assert "h" not in repo.balances
        assert repo.invoices[position].remaining_amount == 30
        assert repo.invoice_count() == 1
        assert repo.latest_position("h") == position
        assert repo.latest_position("g") == position
        assert repo.get_role("new") is Role.UNREGISTERED

    def test_rollback_of_first_invoice_clears_index(self, repo):
        with pytest.raises(RuntimeError):
            with repo.transaction():
                repo.append_invoice(Invoice.issue("h", "g", 5))
                raise RuntimeError("boom")

        assert repo.latest_position("h") == 0
        assert repo.latest_position("g") == 0
        assert repo.invoice_count() == 0

    def test_nested_transaction_joins_outer(self, repo):
        with pytest.raises(RuntimeError):
            with repo.transaction():
                repo.set_balance("a", 1)
                with repo.transaction():
                    repo.set_balance("b", 2)
                raise RuntimeError("boom")

        assert repo.balances == {}

    def test_journal_is_cleared_after_transaction(self, repo):
        with repo.transaction():
            repo.set_balance("a", 1)

        # writes outside a transaction are not journaled and survive
        repo.set_balance("a", 2)
        assert repo.get_balance("a") == 2
