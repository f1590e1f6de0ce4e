"""Constructor wrapping that runs validator hooks around field assignment."""

from __future__ import annotations

import functools
import inspect
from typing import Any, TypeVar

from .modes import ConstructionMode
from .registry import ValidatorRegistry

T = TypeVar("T", bound=type)


def validated(cls: T) -> T:
    """Class decorator that validates every construction of ``cls``.

    The wrapped constructor accepts an extra keyword, ``mode``. The raw
    arguments are bound to the original signature (defaults applied) and
    handed to the pre-construction hook before the original constructor
    assigns any field; the post-construction hook runs on the finished
    instance. The validator key is ``cls`` itself, so a subclass that chains
    to this constructor through ``super().__init__`` runs both validators.

    If the original constructor declares its own ``mode`` parameter, the
    resolved mode is forwarded to it.

    Example:
        @validated
        @dataclass(frozen=True)
        class Plane:
            origin: Vector3
            normal: Vector3
    """
    init = cls.__init__
    signature = inspect.signature(init)
    forwards_mode = "mode" in signature.parameters

    @functools.wraps(init)
    def __init__(
        self: Any,
        *args: Any,
        mode: ConstructionMode | None = None,
        **kwargs: Any,
    ) -> None:
        resolved = ValidatorRegistry.resolve_mode(mode)
        checked = resolved is ConstructionMode.VALIDATED
        if checked:
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            arguments = dict(bound.arguments)
            arguments.pop(next(iter(signature.parameters)))
            arguments.pop("mode", None)
            ValidatorRegistry.pre_construct(cls, arguments)
        if forwards_mode:
            init(self, *args, mode=resolved, **kwargs)
        else:
            init(self, *args, **kwargs)
        if checked:
            ValidatorRegistry.post_construct(cls, self)

    cls.__init__ = __init__  # type: ignore[misc]
    return cls
