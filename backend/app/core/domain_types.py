"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps UUID — never use bare UUID in domain logic

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
