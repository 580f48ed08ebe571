"""
LinkVault Backend — Application Package Initializer
=====================================================

What: A single-user bookmark manager served over HTTP.

Architecture Note:
    ┌─────────────────────────────────────┐
    │   Routes (API Layer) + Auth Gate    │  ← HTTP concerns, password check
    ├─────────────────────────────────────┤
    │         Services (Store)            │  ← Ordering, cascade, redaction
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy on SQLite
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
