"""Callable models: receiver-bound and partially applied functions.

The receiver is always the first positional argument, as with Python
methods. Bound arguments come next, then call-time arguments.
"""

from __future__ import annotations

import inspect
import types
from collections.abc import Callable, Mapping
from typing import Any

from objlang.core.function.context import get_global_context


class BoundFunction:
    """Callable with a fixed receiver and leading arguments.

    The target is either a callable or the name of a member of the context,
    looked up on every call: by key on mappings, by attribute otherwise.
    Plain functions, including ones stored on an instance, are called with
    the receiver as first argument. Callables that already carry a receiver
    (bound methods, such as regular methods looked up by attribute) keep it.

    Args:
        context: Receiver. None means the global context at call time.
        target: Callable or member name.
        args: Leading positional arguments.
        kwargs: Default keyword arguments, overridable at call time.
    """

    __slots__ = ("_context", "_target", "_args", "_kwargs")

    def __init__(
        self,
        context: Any,
        target: Callable[..., Any] | str,
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
    ) -> None:
        self._context = context
        self._target = target
        self._args = args
        self._kwargs = kwargs or {}

    @property
    def context(self) -> Any:
        """The context given at bind time, possibly None."""
        return self._context

    @property
    def receiver(self) -> Any:
        """The object the target is invoked on right now."""
        if self._context is None:
            return get_global_context()
        return self._context

    @property
    def target(self) -> Callable[..., Any] | str:
        """Callable or member name invoked on the receiver."""
        return self._target

    @property
    def args(self) -> tuple[Any, ...]:
        """Leading positional arguments passed after the receiver."""
        return self._args

    @property
    def kwargs(self) -> dict[str, Any]:
        """Default keyword arguments, overridable at call time."""
        return dict(self._kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        receiver = self.receiver
        call_args = (*self._args, *args)
        call_kwargs = {**self._kwargs, **kwargs}

        if isinstance(self._target, str):
            if isinstance(receiver, Mapping):
                func = receiver[self._target]
            else:
                func = getattr(receiver, self._target)
        else:
            func = self._target

        if inspect.ismethod(func):
            return func(*call_args, **call_kwargs)
        return func(receiver, *call_args, **call_kwargs)

    def __repr__(self) -> str:
        return f"BoundFunction({self._target!r}, context={self._context!r}, args={self._args!r})"


class PartialFunction:
    """Callable with fixed leading arguments and a pass-through receiver.

    Stored as a class attribute it binds like a plain function, so
    `instance.attr(x)` calls `func(instance, *args, x)`.

    Args:
        func: Callable to apply.
        args: Leading positional arguments.
        kwargs: Default keyword arguments, overridable at call time.
    """

    __slots__ = ("_func", "_args", "_kwargs")

    def __init__(
        self,
        func: Callable[..., Any],
        args: tuple[Any, ...] = (),
        kwargs: dict[str, Any] | None = None,
    ) -> None:
        self._func = func
        self._args = args
        self._kwargs = kwargs or {}

    @property
    def func(self) -> Callable[..., Any]:
        """Callable being partially applied."""
        return self._func

    @property
    def args(self) -> tuple[Any, ...]:
        """Leading positional arguments passed before call-time arguments."""
        return self._args

    @property
    def kwargs(self) -> dict[str, Any]:
        """Default keyword arguments, overridable at call time."""
        return dict(self._kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._func(*self._args, *args, **{**self._kwargs, **kwargs})

    def __get__(self, instance: Any, owner: type | None = None) -> PartialFunction:
        if instance is None or inspect.ismethod(self._func):
            return self
        return PartialFunction(types.MethodType(self._func, instance), self._args, self._kwargs)

    def __repr__(self) -> str:
        return f"PartialFunction({self._func!r}, args={self._args!r})"
