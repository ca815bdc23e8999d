"""CASEFLOW

A small case-management service. Cases move through a fixed, forward-only
lifecycle (OPEN → IN_PROGRESS → DONE → CLOSED); every status change is checked
against the domain rules before it is persisted.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
