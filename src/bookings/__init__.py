"""
Booking Module

Guest and signed-in bookings on scheduled trips:

- Seat availability check and atomic seat decrement
- Miles accrual for signed-in travellers
- Booking lookup, per-user listing and owner-only cancellation
"""
