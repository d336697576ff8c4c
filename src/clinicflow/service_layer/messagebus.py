"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable

from clinicflow.domain.errors import DomainError
from clinicflow.interfaces.unit_of_work import AbstractUnitOfWork

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The main responsibility of the message bus is to route commands to their
    appropriate handlers and hand back whatever view the handler returns. It
    also manages logging during the dispatch process and exposes the unit of
    work used for transactional operations for convenience.

    Args:
        uow: An instance of AbstractUnitOfWork for managing transactional operations.
            This uow should still have been injected into the command handlers, it is
            just also available here for convenience.
        command_handlers: A mapping of command types to their handlers.
            Note that handlers should be callables that accept a single command argument.
            Additional dependencies (uow, id generator, clock) are injected by the
            bootstrap layer.

    Note:
        This implementation is synchronous; one command runs to completion before
        `handle` returns. Domain errors are expected outcomes and are logged at
        INFO; anything else is logged with its traceback. Both are re-raised.
    """

    def __init__(
        self,
        uow: AbstractUnitOfWork,
        command_handlers: dict[type[Command], Callable[..., object]],
    ) -> None:
        self.uow = uow
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> object:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            The handler's result: a view, a list of views, or None for deletes.

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            DomainError: If the handler rejects the command.
            Exception: If the handler fails unexpectedly.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                return handler(cmd)
            except DomainError as exc:
                logger.info(
                    "Command %s rejected (%s): %s",
                    type(cmd).__name__,
                    exc.kind.value,
                    exc,
                )
                raise
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., object]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
