"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

from decimal import Decimal

import pytest

from event_tickets.domain import Money, TicketCount, TicketCriteria


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(Decimal("10.50")).amount == Decimal("10.50")

    def test_money_accepts_zero(self):
        """Money can be created with zero, meaning a free event."""
        assert Money(Decimal("0")).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(Decimal("-0.01"))

    def test_money_str_format(self):
        """Money string representation is formatted to 2 decimal places."""
        assert str(Money(Decimal("7"))) == "7.00"


class TestTicketCount:
    """Tests for TicketCount value object."""

    def test_count_accepts_zero(self):
        """TicketCount can be created with zero."""
        assert TicketCount(0).value == 0

    def test_count_rejects_negative_value(self):
        """TicketCount raises ValueError for negative value."""
        with pytest.raises(ValueError):
            TicketCount(-1)


class TestEventTicket:
    """Tests for the EventTicket domain model."""

    def test_requires_ticket_types(self, build_ticket):
        """An event ticket with no ticket types is rejected."""
        with pytest.raises(ValueError):
            build_ticket(ticket_types=())


class TestTicketCriteria:
    """Tests for in-process criteria matching."""

    @pytest.mark.parametrize("category", ["web3", "WEB3", "Web3"])
    def test_category_matches_ignoring_case(self, build_ticket, category):
        """Category matching ignores case."""
        assert TicketCriteria(category=category).matches(build_ticket(category="Web3"))

    def test_non_ascii_category_matches_ignoring_case(self, build_ticket):
        """Accented letters fold the same way the database key does."""
        assert TicketCriteria(category="MÚSICA").matches(build_ticket(category="Música"))

    @pytest.mark.parametrize("category", ["web", "web3x", "Web3 "])
    def test_category_match_is_exact(self, build_ticket, category):
        """Category matching is anchored, never a substring match."""
        assert not TicketCriteria(category=category).matches(build_ticket(category="Web3"))

    def test_trending_by_flag_or_sales(self, build_ticket):
        """Trending means flagged trending or more than 100 sold."""
        criteria = TicketCriteria(trending_only=True)
        assert criteria.matches(build_ticket(is_trending=True))
        assert criteria.matches(build_ticket(sold_tickets=TicketCount(101)))
        assert not criteria.matches(build_ticket(sold_tickets=TicketCount(100)))
