"""Reaction to expanding or shrinking the cube structure at the wrong time."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from engine.config import get as engine_config_get

LOGGER = logging.getLogger(__name__)


class PreconditionViolated(RuntimeError):
    """Raised when a size change is refused by the EXCEPTION behaviour."""


class SizeChangeBehaviour(Enum):
    IGNORE = "ignore"
    WARNING = "warning"
    ERROR = "error"
    EXCEPTION = "exception"

    @classmethod
    def parse(cls, value: Union[str, "SizeChangeBehaviour"]) -> "SizeChangeBehaviour":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        if name == "fail":
            return cls.EXCEPTION
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"unknown size change behaviour: {value!r}") from None


DEFAULT_BEHAVIOUR = SizeChangeBehaviour.EXCEPTION


class SizeChangePolicy:
    """Decides what happens when an expand/shrink is not wanted.

    IGNORE proceeds silently, WARNING and ERROR log at that level and proceed,
    EXCEPTION refuses the change by raising ``PreconditionViolated``.
    """

    def __init__(self, behaviour: Union[str, SizeChangeBehaviour] = DEFAULT_BEHAVIOUR) -> None:
        self.behaviour = SizeChangeBehaviour.parse(behaviour)

    @classmethod
    def from_config(cls, default: Optional[SizeChangeBehaviour] = None) -> "SizeChangePolicy":
        fallback = default or DEFAULT_BEHAVIOUR
        return cls(engine_config_get("cube.size_change_behaviour", fallback.value))

    def check(self, wanted: bool, message: str) -> None:
        """Apply the behaviour when ``wanted`` is false; return normally to proceed."""
        if wanted:
            return
        behaviour = self.behaviour
        if behaviour is SizeChangeBehaviour.WARNING:
            LOGGER.warning(message)
        elif behaviour is SizeChangeBehaviour.ERROR:
            LOGGER.error(message)
        elif behaviour is SizeChangeBehaviour.EXCEPTION:
            raise PreconditionViolated(message)

    def __repr__(self) -> str:
        return f"SizeChangePolicy({self.behaviour.name})"
