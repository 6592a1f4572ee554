"""
Tests for booking payment state derivation.
"""
from app.domain.bookings.payments import derive_payment


class TestDerivePayment:

    def test_nothing_paid(self):
        assert derive_payment(50000, 0) == (50000, "pending")

    def test_partial_payment(self):
        assert derive_payment(50000, 20000) == (30000, "partial")

    def test_paid_in_full(self):
        assert derive_payment(50000, 50000) == (0, "paid")

    def test_overpaid_is_paid_with_negative_remaining(self):
        assert derive_payment(50000, 60000) == (-10000, "paid")

    def test_missing_paid_amount(self):
        assert derive_payment(1000, None) == (1000, "pending")
