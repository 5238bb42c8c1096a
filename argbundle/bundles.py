"""
Argbundle call-argument bundles.

Overview
- ArgumentsBundle: immutable value object capturing "a call's arguments":
  • positional: tuple of arbitrary values (order significant).
  • keyed: read-only mapping of str names to arbitrary values (order not significant).
  • trailing_callable: optional callable riding along with the call, or None.

- EmptyArgumentsBundle: final, process-wide singleton variant meaning "no arguments
  were captured". Reach it with empty() or ArgumentsBundle.empty().

Comparison
- equals()/strict_equals() return None when the other object does not share the exact
  runtime type ("not comparable"), otherwise True/False. __eq__ maps None to
  NotImplemented so == falls back to Python's default and yields False.
- A plain bundle with empty contents is never equal to the empty variant.
- hash() combines (runtime type, positional, keyed items, trailing callable); contents
  must be hashable for hash() to succeed.

Lookup
- bundle[int] → positional item (negative indices allowed, IndexError when out of range).
- bundle[str] → keyed item (KeyError when missing).
- get() has the same dispatch but returns a default instead of raising.
- Any other key type raises InvalidKeyType (bool is not accepted as an index).

Destructuring
    >>> bundle = ArgumentsBundle(("foo",), {"foo": "bar"})
    >>> positional, keyed, trailing_callable = bundle
    >>> match bundle:
    ...     case ArgumentsBundle(("foo",), {"foo": value}):
    ...         value
    'bar'
"""
import threading
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import final

from rich.text import Text

from .faults import InvalidKeyType
from .utils import *

_FIELDS = ("positional", "keyed", "trailing_callable")


class ArgumentsBundle:
    """
    Immutable (positional, keyed, trailing_callable) triple.

    Parameters
    - positional: Sequence (non-string), defaults to ().
    - keyed: Mapping[str, Any], defaults to {}.
    - trailing_callable: Callable | None, defaults to None.

    Raises
    - TypeError: on a string/non-sequence positional, a non-mapping keyed,
      a non-str name in keyed, or a non-callable trailing_callable.
    """
    __slots__ = ("_positional", "_keyed", "_trailing_callable")
    __match_args__ = _FIELDS

    def __init__(self, positional=Unset, keyed=Unset, trailing_callable=None):
        positional = coalesce(positional, ())
        keyed = coalesce(keyed, {})

        if not isinstance(positional, Sequence) or isinstance(positional, (str, bytes, bytearray)):
            raise TypeError(f"{type(self).__name__} 'positional' must be a sequence")
        if not isinstance(keyed, Mapping):
            raise TypeError(f"{type(self).__name__} 'keyed' must be a mapping")
        if not all(isinstance(name, str) for name in keyed):
            raise TypeError(f"{type(self).__name__} 'keyed' names must be strings")
        if trailing_callable is not None and not callable(trailing_callable):
            raise TypeError(f"{type(self).__name__} 'trailing_callable' must be callable")

        object.__setattr__(self, "_positional", freeze(positional))
        object.__setattr__(self, "_keyed", freeze(keyed))
        object.__setattr__(self, "_trailing_callable", trailing_callable)

    @classmethod
    def capture(cls, /, *args, **kwargs):
        """
        Build a bundle from the caller's own variadic arguments.

            >>> ArgumentsBundle.capture(1, 2, mode="fast").keyed
            mappingproxy({'mode': 'fast'})
        """
        return cls(args, kwargs)

    @staticmethod
    def empty():
        """
        Return the process-wide empty variant (same object on every call).
        """
        return EmptyArgumentsBundle()

    @property
    def positional(self):
        return self._positional

    @property
    def keyed(self):
        return self._keyed

    @property
    def trailing_callable(self):
        return self._trailing_callable

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name, /):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    # --- queries ---

    def is_empty_variant(self):
        return False

    def has_any(self):
        if self._positional:
            return True
        if self._keyed:
            return True
        if self._trailing_callable is not None:
            return True
        return False

    def is_none(self):
        return not self.has_any()

    def is_empty_contents(self):
        return self.is_none()

    def is_present(self):
        return self.has_any()

    def is_blank(self):
        return self.is_none()

    def __bool__(self):
        return self.has_any()

    # --- lookup ---

    def __getitem__(self, key, /):
        match key:
            case bool():
                raise InvalidKeyType(key)
            case int():
                return self._positional[key]
            case str():
                return self._keyed[key]
            case _:
                raise InvalidKeyType(key)

    def get(self, key, default=None, /):
        """
        Look up a positional (int key) or keyed (str key) argument.

        Out-of-range indices and missing names yield `default`; unsupported
        key types raise InvalidKeyType.
        """
        try:
            return self[key]
        except (IndexError, KeyError):
            return default

    # --- comparison ---

    def _compare(self, other, /):
        if type(other) is not type(self):
            return None
        if self._positional != other._positional:
            return False
        if self._keyed != other._keyed:
            return False
        if self._trailing_callable != other._trailing_callable:
            return False
        return True

    def equals(self, other, /):
        """
        General comparison: True/False for same-type bundles, None when not comparable.
        """
        return self._compare(other)

    def strict_equals(self, other, /):
        """
        Comparison used to resolve hash-table collisions (see __eq__).

        Same result as equals(): True/False for same-type bundles, None otherwise.
        """
        return self._compare(other)

    def __eq__(self, other, /):
        if (result := self.strict_equals(other)) is None:
            return NotImplemented
        return result

    def hash_code(self):
        return hash((type(self), self._positional, frozenset(self._keyed.items()), self._trailing_callable))

    def __hash__(self):
        return self.hash_code()

    # --- destructuring ---

    def to_tuple(self):
        return self._positional, self._keyed, self._trailing_callable

    def to_fields(self, selected_keys=None, /):
        """
        Return a dict of the requested fields.

        `None` selects all of "positional", "keyed" and "trailing_callable";
        unknown names are skipped.
        A bare string raises TypeError.
        """
        if selected_keys is None:
            selected_keys = _FIELDS
        elif isinstance(selected_keys, str):
            raise TypeError("to_fields() argument must be an iterable of names, not a string")
        return {name: getattr(self, name) for name in selected_keys if name in _FIELDS}

    def __iter__(self):
        return iter(self.to_tuple())

    # --- deferred invocation ---

    def invoke(self, function, /):
        """
        Call `function(*positional, **keyed)`.

        A present trailing callable is passed as the last positional argument.
        """
        if self._trailing_callable is None:
            return function(*self._positional, **self._keyed)
        return function(*self._positional, self._trailing_callable, **self._keyed)

    # --- copying & representation ---

    def __copy__(self):
        return self

    def __reduce__(self):
        return type(self), (self._positional, dict(self._keyed), self._trailing_callable)

    def __rich_repr__(self):
        yield "positional", self._positional
        yield "keyed", dict(self._keyed)
        yield "trailing_callable", self._trailing_callable

    def __repr__(self):
        return f"{type(self).__name__}({', '.join('%s=%r' % pair for pair in self.__rich_repr__())})"


@final
class EmptyArgumentsBundle(ArgumentsBundle):
    """
    Singleton variant of ArgumentsBundle with fixed empty contents.

    Notes
    - EmptyArgumentsBundle() always returns the same instance per process;
      the first construction is guarded by a lock.
    - copy, deepcopy and pickle preserve the identity.
    - The type is final; subclassing raises TypeError.
    """
    __slots__ = ()
    __lock = threading.Lock()
    __instance = Unset

    def __new__(cls):
        if cls.__instance is Unset:
            with cls.__lock:
                if cls.__instance is Unset:
                    self = super().__new__(cls)
                    ArgumentsBundle.__init__(self)
                    cls.__instance = self
        return cls.__instance

    def __init__(self):
        # Contents are fixed once in __new__.
        pass

    def __init_subclass__(cls, **options):
        raise TypeError("type 'EmptyArgumentsBundle' is not an acceptable base type")

    def is_empty_variant(self):
        return True

    def __reduce__(self):
        return EmptyArgumentsBundle, ()

    def __rich_repr__(self):
        # Pretty printers show EmptyArgumentsBundle(), which rebuilds the singleton.
        yield from ()

    def __rich__(self):
        return Text(repr(self), style="dim")

    def __repr__(self):
        return "ArgumentsBundle.empty()"


def empty():
    """
    Return the process-wide EmptyArgumentsBundle, building it on first access.
    """
    return EmptyArgumentsBundle()


__all__ = (
    "ArgumentsBundle",
    "EmptyArgumentsBundle",
    "empty",
)
