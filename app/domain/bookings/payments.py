"""Booking payment state derived from total and paid amounts"""


def derive_payment(total_amount: float, paid_amount: float) -> tuple[float, str]:
    """
    Returns (remaining_amount, payment_status).

    Fully covered (including overpaid) bookings are "paid", any positive
    payment short of the total is "partial", otherwise "pending".
    """
    paid_amount = paid_amount or 0
    remaining = (total_amount or 0) - paid_amount
    if remaining <= 0:
        return remaining, "paid"
    if paid_amount > 0:
        return remaining, "partial"
    return remaining, "pending"
