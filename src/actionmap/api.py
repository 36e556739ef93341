# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime contracts shared by actions and generated route modules."""

# pylint: disable=too-few-public-methods -- interfaces intentionally expose minimal method surfaces.

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from typing import Any, Final, Protocol, TypeVar, runtime_checkable

ACTION_PATH_ATTR: Final[str] = "__action_path__"

ClassT = TypeVar("ClassT", bound=type)


def action(path: str) -> Callable[[ClassT], ClassT]:
    """Mark a class as a routable action reachable under ``path``.

    The decorator only records ``path`` on the class. Discovery happens at
    build time by scanning source, not by importing modules.

    Args:
        path: Route path, conventionally ``"<module-name>/<ActionName>"``.

    Returns:
        Callable[[ClassT], ClassT]: Decorator returning the class unchanged.
    """

    def _mark(cls: ClassT) -> ClassT:
        setattr(cls, ACTION_PATH_ATTR, path)
        return cls

    return _mark


def action_path(cls: type) -> str | None:
    """Return the path recorded by :func:`action` on ``cls`` itself, if any.

    Subclasses do not inherit the marker: an undecorated subclass is not an
    action of its own.
    """

    return cls.__dict__.get(ACTION_PATH_ATTR)


@runtime_checkable
class RouterAction(Protocol):
    """Capability implemented by routable action classes."""

    def connect(self, context: Any, request_data: Mapping[str, Any]) -> Any:
        """Execute the action for ``context`` with ``request_data``."""

        raise NotImplementedError


class RouterModule(ABC):
    """Lookup interface implemented by every generated route module."""

    @abstractmethod
    def find_action_class_name(self, path: str) -> str | None:
        """Return the fully-qualified class implementing ``path``, or ``None``."""


__all__ = ["ACTION_PATH_ATTR", "RouterAction", "RouterModule", "action", "action_path"]
