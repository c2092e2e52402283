"""
StaffDesk Backend — Application Package Initializer
=====================================================

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← presence checks, hashing, uploads
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy mappings + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Database client on app.state
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
