"""
Notes API — Application Package
================================

What: In-memory personal notes service (create, list, get, update, delete).
How:  Layered the same way top to bottom:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, ids, timestamps
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← frozen Note + Pydantic contracts
    ├─────────────────────────────────────┤
    │        Storage (In-Memory)          │  ← striped-lock keyed store
    └─────────────────────────────────────┘

Nothing is persisted: every note lives only as long as the process.
"""

__version__ = "1.0.0"
