"""
Operation outcome contract.

Every public analyzer operation swallows its own failures and returns a safe
fallback value. The outcome records what actually happened so callers can
inspect failures instead of reading logs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from catalog_insights.error_handler import CatalogError


@dataclass(frozen=True)
class OperationResult:
    operation: str
    value: Any = None
    error: Optional[CatalogError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, operation: str, value: Any) -> "OperationResult":
        return cls(operation=operation, value=value)

    @classmethod
    def failure(cls, operation: str, error: CatalogError, fallback: Any = None) -> "OperationResult":
        return cls(operation=operation, value=fallback, error=error)
