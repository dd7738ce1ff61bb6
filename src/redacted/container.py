"""
Redacted value container.

``Redacted`` wraps a single value of any type so that it cannot leak into
logs, string interpolation, or serialized output by accident. Every
textual or structured representation of the container renders the
process-wide redaction message instead of the payload. The real value is
only reachable through an explicit ``unwrap``.

Example:
    >>> token = Redacted.wrap("hunter2")
    >>> f"token={token}"
    'token=<redacted>'
    >>> Redacted.unwrap(token)
    'hunter2'
    >>> Redacted.unwrap(token.transform(len))
    7
"""

from __future__ import annotations

import copy
import inspect
from collections.abc import Awaitable, Callable, Coroutine
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, get_args, overload

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .config.message import get_redacted_message

if TYPE_CHECKING:
    from rich.text import Text

T = TypeVar("T")
U = TypeVar("U")


class Redacted(Generic[T]):
    """Immutable holder of a value that never renders its payload.

    The container stores the value as given (no copy) and exposes it only
    via ``unwrap``. ``str``, ``repr``, ``format``, ``to_json`` and the
    pretty-printer hooks of IPython and rich all return the redaction
    message. Two containers compare equal when their payloads do.
    """

    __slots__ = ("_value", "__weakref__")

    _value: T

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    @classmethod
    def wrap(cls, value: U) -> Redacted[U]:
        """Wrap a value in a new container.

        Args:
            value: Any value, including None, callables and other containers.

        Returns:
            A container owning ``value``.
        """
        return cls(value)  # type: ignore[arg-type, return-value]

    @staticmethod
    def unwrap(redacted: Redacted[U]) -> U:
        """Return the payload of a container, unchanged.

        Args:
            redacted: The container to open.

        Returns:
            The exact object that was wrapped.

        Raises:
            TypeError: If ``redacted`` is not a container.
        """
        if not isinstance(redacted, Redacted):
            raise TypeError(f"Expected a Redacted container, got {type(redacted).__name__}")
        return redacted._value

    def get_value(self) -> T:
        """Return the payload. Shorthand for ``Redacted.unwrap(self)``."""
        return self._value

    @overload
    def transform(  # type: ignore[overload-overlap]
        self, func: Callable[[T], Awaitable[U]]
    ) -> Coroutine[Any, Any, Redacted[U]]: ...

    @overload
    def transform(self, func: Callable[[T], U]) -> Redacted[U]: ...

    def transform(self, func: Callable[[T], Any]) -> Any:
        """Apply ``func`` to the payload and wrap the result in a new container.

        The original container is left untouched. If ``func`` returns an
        awaitable, a coroutine is returned instead which resolves to the new
        container once the awaitable completes. Exceptions raised by ``func``
        or by the awaitable propagate unchanged.

        Args:
            func: Projection from the payload to the new payload.

        Returns:
            ``Redacted[U]``, or a coroutine resolving to it for async callbacks.
        """
        result = func(self._value)
        if inspect.isawaitable(result):
            return self._wrap_awaitable(result)
        return type(self).wrap(result)

    async def _wrap_awaitable(self, awaitable: Awaitable[U]) -> Redacted[U]:
        return type(self).wrap(await awaitable)

    # Representation hooks

    def __str__(self) -> str:
        return get_redacted_message()

    def __repr__(self) -> str:
        return get_redacted_message()

    def __format__(self, format_spec: str) -> str:
        return get_redacted_message()

    def to_json(self) -> str:
        """JSON-compatible representation: the redaction message."""
        return get_redacted_message()

    def _repr_pretty_(self, printer: Any, cycle: bool) -> None:
        # IPython / pretty
        printer.text(get_redacted_message())

    def __rich__(self) -> Text:
        # Text, not str: a message such as "[REDACTED]" must not be parsed as markup
        from rich.text import Text

        return Text(get_redacted_message())

    def __dir__(self) -> list[str]:
        return [name for name in super().__dir__() if name != "_value"]

    # Immutability

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"cannot assign to field {name!r}: {type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"cannot delete field {name!r}: {type(self).__name__} is immutable")

    def __copy__(self) -> Redacted[T]:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Redacted[T]:
        return type(self)(copy.deepcopy(self._value, memo))

    def __reduce_ex__(self, protocol: Any) -> NoReturn:
        raise TypeError(f"cannot pickle {type(self).__name__!r} object")

    def __getstate__(self) -> NoReturn:
        raise TypeError(f"cannot serialize {type(self).__name__!r} state")

    def __setstate__(self, state: Any) -> NoReturn:
        raise TypeError(f"cannot restore {type(self).__name__!r} state")

    # Equality

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Redacted):
            return NotImplemented
        # Identity first, like list and dict comparisons (keeps nan == nan)
        return self._value is other._value or bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((Redacted, self._value))

    # pydantic integration

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate raw input against ``T`` and wrap it.

        Existing containers pass through in Python mode. Serialization keeps
        the container in Python mode and emits the redaction message in JSON
        mode.
        """
        args = get_args(source_type)
        inner_schema = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        wrap_schema = core_schema.no_info_after_validator_function(cls.wrap, inner_schema)
        return core_schema.json_or_python_schema(
            json_schema=wrap_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), wrap_schema],
                mode="left_to_right",
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize,
                info_arg=True,
            ),
        )

    @staticmethod
    def _serialize(value: Redacted[Any], info: core_schema.SerializationInfo) -> Any:
        if info.mode_is_json():
            return value.to_json()
        return value


def wrap(value: U) -> Redacted[U]:
    """Wrap a value in a new container.

    Convenience function for ``Redacted.wrap``.
    """
    return Redacted.wrap(value)


def unwrap(redacted: Redacted[U]) -> U:
    """Return the payload of a container.

    Convenience function for ``Redacted.unwrap``.
    """
    return Redacted.unwrap(redacted)


@overload
def transform(  # type: ignore[overload-overlap]
    redacted: Redacted[T], func: Callable[[T], Awaitable[U]]
) -> Coroutine[Any, Any, Redacted[U]]: ...


@overload
def transform(redacted: Redacted[T], func: Callable[[T], U]) -> Redacted[U]: ...


def transform(redacted: Redacted[T], func: Callable[[T], Any]) -> Any:
    """Apply ``func`` to the payload of ``redacted``.

    Convenience function for ``Redacted.transform``.
    """
    if not isinstance(redacted, Redacted):
        raise TypeError(f"Expected a Redacted container, got {type(redacted).__name__}")
    return redacted.transform(func)
