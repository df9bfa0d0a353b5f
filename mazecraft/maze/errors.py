"""Contract failures raised during maze construction and generation.

Every error here is fatal for the run that raised it: there is no retry and
no partially generated maze is ever handed back.
"""

from __future__ import annotations

from typing import Any, Type

from mazecraft.logging_utils import get_logger

_log = get_logger("mazecraft.maze")


class MazeContractError(RuntimeError):
    """Base class for all maze contract violations."""


class InvalidDimensionError(MazeContractError, ValueError):
    def __init__(self, field: str, value: Any, message: str):
        super().__init__(message)
        self.field = field
        self.value = value
        self.message = message


class CellLookupError(MazeContractError, IndexError):
    """Coordinates outside the grid were requested."""


class GenerationInvariantError(MazeContractError):
    """The carve loop reached a state that correct generation never produces."""


def ensure(condition: bool, message: str, exc: Type[MazeContractError] = MazeContractError, **fields) -> None:
    """Raise ``exc`` with ``message`` unless ``condition`` holds.

    Extra keyword fields are attached to the logged ``contract_violation`` event.
    ``InvalidDimensionError`` expects ``field`` and ``value`` to be among them.
    """
    if condition:
        return
    _log.error(event="contract_violation", error=exc.__name__, message=message, **fields)
    if issubclass(exc, InvalidDimensionError):
        raise exc(fields.get("field", ""), fields.get("value"), message)
    raise exc(message)


__all__ = [
    "MazeContractError",
    "InvalidDimensionError",
    "CellLookupError",
    "GenerationInvariantError",
    "ensure",
]
