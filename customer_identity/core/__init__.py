"""
Core domain layer for customer-identity.

This package contains pure business logic with no external dependencies.
All code here should be testable without I/O operations.
"""

from __future__ import annotations

__all__ = []
