# Services package init
"""
Banknote Verifier Backend — Services Layer
===========================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
Why:   Separation of concerns — routes handle HTTP, services handle business rules.

Service Inventory:
    - verification_engine: Pure serial rule compilation and checks (no I/O)
    - ReferenceService: Country and denomination lookups
    - VerificationLogService: Append-only log writes and statistics
    - VerificationService: Orchestrates lookup → check → log for POST /api/verify
    - seed_service: Idempotent load of the reference rule table at startup
"""
