"""Domain policies package."""

from .audit_severity import determine_severity

__all__ = ["determine_severity"]
