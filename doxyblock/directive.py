from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import ClassVar

from .codegen import Emitter
from .formatting import optional
from .kinds import Kind

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


_REGISTRY: dict[Kind, type["Directive"]] = {}
_REGISTRY_LOCK: Lock = Lock()


def _register(cls: type["Directive"]) -> None:
    """Record ``cls`` as the directive class for its kind."""

    with _REGISTRY_LOCK:
        existing = _REGISTRY.get(cls.kind)
        if existing is not None and existing is not cls:
            raise TypeError(
                f"Kind {cls.kind.name} already registered to {existing.__name__}, "
                f"cannot register {cls.__name__}"
            )
        _REGISTRY[cls.kind] = cls


def directive_class(kind: Kind | str) -> type["Directive"]:
    """Look up the directive class for a kind or its command keyword."""

    if not isinstance(kind, Kind):
        try:
            kind = Kind(kind)
        except ValueError:
            raise KeyError(kind) from None
    return _REGISTRY[kind]


def registered_kinds() -> tuple[Kind, ...]:
    return tuple(_REGISTRY)


def freeze(obj: object, *names: str) -> None:
    """Turn list-like fields of a frozen dataclass into tuples in place.

    A bare string counts as a single element, not as a run of characters.
    """
    for name in names:
        value = getattr(obj, name)
        object.__setattr__(obj, name, (value,) if isinstance(value, str) else tuple(value))


# ---------------------------------------------------------------------------
# Render shapes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Directive:
    """One documentation command, able to render itself into an emitter."""

    kind: ClassVar[Kind]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if "kind" in cls.__dict__:
            _register(cls)

    def render(self, tag: str, out: Emitter) -> None:  # pragma: no cover - abstract
        raise NotImplementedError


@dataclass(frozen=True)
class Marker(Directive):
    """Field-less command on a line of its own."""

    def render(self, tag: str, out: Emitter) -> None:
        out.writeln("%s%s", tag, self.kind.value)


@dataclass(frozen=True)
class InlineMarker(Directive):
    """Field-less command written into the current line."""

    def render(self, tag: str, out: Emitter) -> None:
        out.write("%s%s", tag, self.kind.value)


@dataclass(frozen=True)
class LineDirective(Directive):
    """``<tag><keyword> <arguments>`` terminated by a newline.

    Subclasses only say how their fields become the argument text; an empty
    argument string leaves the bare keyword.
    """

    def arguments(self) -> str:
        return ""

    def render(self, tag: str, out: Emitter) -> None:
        out.writeln("%s%s%s", tag, self.kind.value, optional(self.arguments()))


@dataclass(frozen=True)
class InlineDirective(LineDirective):
    """Like :class:`LineDirective` but leaves the line open."""

    def render(self, tag: str, out: Emitter) -> None:
        out.write("%s%s%s", tag, self.kind.value, optional(self.arguments()))
