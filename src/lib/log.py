"""
Centralized logging using Loguru with context-aware verbosity.

LOG() checks the verbosity of the ProgramState connected to the current
context, so the converter and passes can trace their work without taking a
state argument. When no state is connected (library use, tests) nothing
is emitted.

Usage:
    from md2backlog.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Reading source", level=1)
    LOG("Converting 120 lines", level=2)
    LOG("Pass  50 decorations 120 → 120 lines", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <18}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: Object with a `verbosity` attribute (normally ProgramState)
    """
    _program_state.set(state)


def state_disconnectFromLogger() -> None:
    """Detach any connected state; LOG() becomes silent again"""
    _program_state.set(None)


def verbosity_get() -> int:
    """Verbosity of the connected state, or 0 when none is connected"""
    state = _program_state.get()
    return getattr(state, 'verbosity', 0) if state is not None else 0


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=pass trace)
        **kwargs: Additional loguru metadata
    """
    if verbosity_get() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
