"""
Probe domain entity.

A probe is a zero-argument diagnostic action. It may be a coroutine
function, a bound async method on a stateful component, a closure, a
``functools.partial`` or any callable object. The runner treats every probe
as an opaque action and only needs a name to report it under.
"""

from __future__ import annotations

import functools
import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Union

ProbeAction = Callable[[], Union[Awaitable[Any], Any]]

PROBE_NAME_ATTRIBUTE = "probe_name"


def derive_probe_name(action: Any) -> str:
    """Best-effort logical name for ``action``; never raises."""

    explicit = getattr(action, PROBE_NAME_ATTRIBUTE, None)
    if isinstance(explicit, str) and explicit:
        return explicit

    owner = getattr(action, "__self__", None)
    if inspect.ismethod(action) and owner is not None:
        # Bound to a class (classmethod) or an instance
        return owner.__name__ if inspect.isclass(owner) else type(owner).__name__

    if isinstance(action, functools.partial):
        return derive_probe_name(action.func)

    if inspect.isfunction(action) or inspect.isbuiltin(action):
        return getattr(action, "__qualname__", None) or action.__name__

    if callable(action) and not inspect.isclass(action):
        return type(action).__name__

    return repr(action)


@dataclass(frozen=True, slots=True)
class Probe:
    """A named diagnostic action, built once at registration time."""

    name: str
    action: ProbeAction

    @classmethod
    def from_callable(cls, action: Any, name: Optional[str] = None) -> "Probe":
        if isinstance(action, Probe):
            return action if name is None else cls(name=name, action=action.action)
        if not callable(action):
            raise TypeError(f"Probe action must be callable, got {action!r}")
        return cls(name=name or derive_probe_name(action), action=action)

    async def __call__(self) -> None:
        outcome = self.action()
        if inspect.isawaitable(outcome):
            await outcome
