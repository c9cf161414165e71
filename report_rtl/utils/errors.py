"""Custom exceptions for report-rtl."""

from __future__ import annotations


class ReportRTLError(Exception):
    """Base exception for all report-rtl errors."""
    pass


class HostContractError(ReportRTLError):
    """Raised when an object does not provide what the fixer needs from the host engine."""

    def __init__(self, message: str, *, target: object = None, missing: "str | None" = None):
        parts = [message]
        loc = []
        if target is not None:
            loc.append(f"target={type(target).__name__}")
        if missing:
            loc.append(f"missing={missing}")
        if loc:
            parts.append(f"({', '.join(loc)})")
        super().__init__(" ".join(parts))


class ValueResolutionError(ReportRTLError):
    """Raised when the current value of a data member cannot be resolved."""
    pass
