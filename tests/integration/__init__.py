"""
Integration tests that run against a real SQL engine.

Covers:
- Booking and signup scenarios on a file-backed SQLite database
- Rollback and CHECK constraint failures
- Concurrent bookings and signups through the HTTP stack
- Transient error detection and retry
- Health checks
"""
