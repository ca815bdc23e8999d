"""Service layer handlers."""

from collections.abc import Callable

from .case_handlers import HANDLERS as CASE_HANDLERS

__all__ = ["HANDLERS"]

HANDLERS: dict[type, Callable[..., object]] = {
    **CASE_HANDLERS,
}
