"""Bootstrap the message bus with handlers and unit of work."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from clinicflow import config
from clinicflow.adapters.clocks import SystemClock
from clinicflow.adapters.db.engine import make_engine
from clinicflow.adapters.id_generators import ULIDGenerator, UUIDv4Generator
from clinicflow.adapters.unit_of_work import SqlAlchemyUnitOfWork
from clinicflow.interfaces.clock import Clock
from clinicflow.interfaces.id_generator import IdGenerator
from clinicflow.interfaces.unit_of_work import AbstractUnitOfWork
from clinicflow.service_layer.handlers import COMMAND_HANDLERS
from clinicflow.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from clinicflow.service_layer.commands import Command


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    message_bus: MessageBus


def build_write_uow(url: str) -> AbstractUnitOfWork:
    """Build a new unit of work for write operations."""
    engine = make_engine(url)
    return SqlAlchemyUnitOfWork(engine)


ID_GENERATORS: dict[config.IdFormat, Callable[[], IdGenerator]] = {
    config.IdFormat.UUID4: UUIDv4Generator,
    config.IdFormat.ULID: ULIDGenerator,
}


def build_id_generator(id_format: config.IdFormat) -> IdGenerator:
    """Build the id generator for a configured id format."""
    return ID_GENERATORS[id_format]()


def build_message_bus(
    uow: AbstractUnitOfWork,
    command_handlers: dict[type[Command], Callable[..., object]],
    *,
    id_generator: IdGenerator | None = None,
    clock: Clock | None = None,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {
        "uow": uow,
        "id_generator": id_generator or UUIDv4Generator(),
        "clock": clock or SystemClock(),
    }
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        uow,
        command_handlers=injected_command_handlers,
    )


def bootstrap(
    uow: AbstractUnitOfWork | None = None,
    id_generator: IdGenerator | None = None,
    clock: Clock | None = None,
) -> AppContainer:
    """Bootstrap the message bus with handlers and unit of work.

    Without an explicit unit of work, a SQL one is built from
    ``CLINICFLOW_DB_URL``. Without an explicit id generator, the format
    named by ``CLINICFLOW_ID_FORMAT`` is used.

    Raises:
        DatabaseUrlNotSetError: If no unit of work is given and the
            environment does not name a database.
        InvalidIdFormatError: If the configured id format is unknown.
    """
    if id_generator is None:
        id_generator = build_id_generator(config.get_id_format())
    if uow is None:
        uow = build_write_uow(config.get_db_url())
    message_bus = build_message_bus(
        uow, COMMAND_HANDLERS, id_generator=id_generator, clock=clock
    )

    return AppContainer(
        message_bus=message_bus,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return functools.partial(handler, **deps)
