"""Message bus routing commands and queries to their handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

from caseflow.domain.errors import DomainError
from caseflow.interfaces.case_repository import CaseVersionConflictError
from caseflow.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command
from .queries import Query

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods

Message: TypeAlias = Command | Query
Handler: TypeAlias = Callable[..., Any]

# Outcomes callers are expected to map to a response, not faults.
REJECTIONS = (DomainError, CaseVersionConflictError)


class NoHandlerForMessage(LookupError):
    """Exception raised when no handler is registered for a message type."""

    def __init__(self, message: object) -> None:
        super().__init__(f"No handler found for message {type(message).__name__}")


class MessageBus:
    """A simple synchronous message bus.

    Routes each command or query to the handler registered for its exact
    type and returns whatever the handler returns (a `CaseView`, a list of
    them, or None). Exceptions raised by handlers are re-raised unchanged, so
    callers see the typed domain errors. Domain errors and version conflicts
    are logged at INFO; anything else is logged at ERROR with its traceback.

    Args:
        uow: The unit of work injected into the handlers, exposed here for
            convenience (tests inspect it).
        handlers: A mapping of message types to handlers. Handlers accept the
            message as their only positional argument; other dependencies are
            bound beforehand (see `caseflow.bootstrap`).
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        handlers: dict[type, Handler],
    ) -> None:
        self.uow = uow
        self._handlers = handlers

    def handle(self, message: Message) -> Any:
        """Dispatch a message to its handler and return the handler's result.

        Raises:
            NoHandlerForMessage: If no handler is registered for the message type.
            Exception: Whatever the handler raises.
        """

        if handler := self._handlers.get(type(message)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling %s with handler %s", message, handler_name)
            try:
                return handler(message)
            except REJECTIONS as e:
                logger.info("%s rejected by handler %s: %s", message, handler_name, e)
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling %s with handler %s", message, handler_name
                )
                raise

        logger.error("No handler found for message %s", type(message).__name__)
        raise NoHandlerForMessage(message)

    @staticmethod
    def _get_handler_name(fn: Handler) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
