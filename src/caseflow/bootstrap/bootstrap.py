"""Bootstrap the message bus with handlers, unit of work and collaborators."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial

from caseflow import config
from caseflow.adapters.clock import SystemClock
from caseflow.adapters.db.engine import make_engine
from caseflow.adapters.id_generators import make_id_generator
from caseflow.adapters.unit_of_work import SqlAlchemyUnitOfWork
from caseflow.interfaces.clock import Clock
from caseflow.interfaces.id_generator import IdGenerator
from caseflow.interfaces.unit_of_work import AbstractUnitOfWork
from caseflow.service_layer.handlers import HANDLERS
from caseflow.service_layer.messagebus import Handler, MessageBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus


def build_uow(url: str) -> AbstractUnitOfWork:
    """Build a unit of work on a fresh engine for `url`."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


def build_message_bus(
    uow: AbstractUnitOfWork,
    handlers: Mapping[type, Handler],
    *,
    id_generator: IdGenerator,
    clock: Clock,
) -> MessageBus:
    """Build a message bus whose handlers have their dependencies bound."""
    dependencies = {"uow": uow, "id_generator": id_generator, "clock": clock}
    injected_handlers = {
        message_type: inject_dependencies(handler, dependencies)
        for message_type, handler in handlers.items()
    }
    return MessageBus(uow, handlers=injected_handlers)


def bootstrap(db_url: str | None = None) -> AppContainer:
    """Wire the application against `db_url` (default: ``CASEFLOW_DB_URL``).

    Raises:
        config.DatabaseUrlNotSetError: If no URL is given and none is configured.
        ValueError: If ``CASEFLOW_ID_SCHEME`` names an unknown scheme.
    """
    url = db_url if db_url is not None else config.get_db_url()
    scheme = config.get_id_scheme()
    logger.debug("Bootstrapping with id scheme %s", scheme)

    message_bus = build_message_bus(
        build_uow(url),
        HANDLERS,
        id_generator=make_id_generator(scheme),
        clock=SystemClock(),
    )
    return AppContainer(message_bus=message_bus)


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Bind the dependencies a handler declares (by parameter name)."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
