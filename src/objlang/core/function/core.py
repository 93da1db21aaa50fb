"""Function binding and partial application.

Usage:
    class Greeter:
        name = "world"

        def greet(self, greeting):
            return f"{greeting}, {self.name}"

    greeter = Greeter()
    hello = bind(greeter, "greet", "hello")
    hello()                                  # "hello, world"

    # Late binding: the member is looked up on every call, and plain
    # functions stored on the instance still receive it first
    greeter.greet = lambda self, greeting: f"{greeting.upper()}, {self.name}"
    hello()                                  # "HELLO, world"

    # Mapping contexts receive themselves as first argument
    record = {"name": "dict", "describe": lambda self: self["name"]}
    bind(record, "describe")()               # "dict"

    # Partial application keeps the call-site receiver
    def tag(self, prefix, text):
        return f"{prefix}{self.name}:{text}"

    Greeter.tagged = partial(tag, "#")
    greeter.tagged("hi")                     # "#world:hi"
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from objlang.core.function.models import BoundFunction, PartialFunction


def bind(context: Any, func: Callable[..., Any] | str, *args: Any, **kwargs: Any) -> BoundFunction:
    """Fix the receiver and leading arguments of a function.

    Args:
        context: Receiver passed as first argument. None uses the global
            context (see get_global_context), resolved at call time.
        func: Callable, or name of a member of context looked up at call time.
        *args: Leading positional arguments.
        **kwargs: Default keyword arguments.

    Returns:
        New BoundFunction, never the input function itself.

    Raises:
        TypeError: If func is neither callable nor a member name.
    """
    if not (isinstance(func, str) or callable(func)):
        raise TypeError(f"bind() expects a callable or member name, got {type(func).__name__}")
    return BoundFunction(context, func, args, kwargs)


def partial(func: Callable[..., Any], *args: Any, **kwargs: Any) -> PartialFunction:
    """Fix the leading arguments of a function, leaving the receiver open.

    Args:
        func: Callable to apply.
        *args: Leading positional arguments.
        **kwargs: Default keyword arguments.

    Returns:
        New PartialFunction.

    Raises:
        TypeError: If func is not callable.
    """
    if not callable(func):
        raise TypeError(f"partial() expects a callable, got {type(func).__name__}")
    return PartialFunction(func, args, kwargs)
