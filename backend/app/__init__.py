"""
Banknote Verifier Backend — Application Package Initializer
===========================================================

What: Marks the `app` directory as a Python package.
Why:  Enables module imports like `from app.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows the same layered split as every request path:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Lookup, Verify, Log)    │  ← Orchestration, store access
    ├─────────────────────────────────────┤
    │   Verification Engine (pure)        │  ← Regex + length rule checks
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The engine has no I/O and no imports from the layers above it, so the
    serial rules can be tested without a database or an HTTP client.
"""

__version__ = "1.0.0"
