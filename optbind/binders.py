"""
optbind value binders.

Overview
- Variable[_T]
  • Caller-owned holder for one bound value. The declared type selects the
    binder variant; the parser only ever writes into `variable.value` (or into
    the caller's own list for list variables).
- Binders (closed set of tagged variants)
  • FlagBinder: bool storage; default_apply() stores True.
  • ValueBinder: str/int/float storage; parse_apply() overwrites.
  • OptionalBinder: `int | None`-style storage; parse_apply() fills the
    contained value, creating it when absent.
  • ListBinder: `list[T]` storage; parse_apply() appends one element.
- bind(target)
  • Build the binder for a Variable (or a bare list, bound as list[str]).

Conversion rules
- str is taken verbatim.
- int accepts only an optional '-' followed by ASCII digits.
- float accepts decimal and exponent forms plus inf/infinity/nan, with an
  optional leading '-'.
- The whole token must be consumed: '+5', ' 5', '1_000', '5px' all fail.
- On failure parse_apply() returns False and leaves the storage untouched.

Examples
    >>> level = Variable(int | None)
    >>> bind(level).parse_apply("5"), level.value
    (True, 5)
    >>> files = Variable(list[str])
    >>> bind(files).parse_apply("a.txt"), files.value
    (True, ['a.txt'])
"""
import enum
import re
import types
import typing
from abc import ABC, abstractmethod
from collections.abc import MutableSequence

from .utils import *

_INTEGER = re.compile(r"-?[0-9]+", re.ASCII)
_FLOAT = re.compile(
    r"-?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE
)

_SCALARS = (str, int, float)


class OptionKind(enum.Enum):
    """
    kind of a registered option, derived from its binder.
    """
    FLAG = "flag"
    VALUE = "value"
    LIST = "list"


def convert(type, text, /):
    """
    convert a token into one of the supported scalar types.

    raises ValueError when the token is not fully consumed by the conversion.
    """
    if type is str:
        return text
    if type is int:
        if not _INTEGER.fullmatch(text):
            raise ValueError("invalid integer literal %r" % text)
        return int(text)
    if type is float:
        if not _FLOAT.fullmatch(text):
            raise ValueError("invalid floating-point literal %r" % text)
        return float(text)
    raise TypeError("unsupported value type %r" % type)


def _optional(annotation):
    # `T | None` and `Optional[T]` both decompose to (T, NoneType)
    if typing.get_origin(annotation) not in (types.UnionType, typing.Union):
        return Unset
    arguments = [argument for argument in typing.get_args(annotation) if argument is not types.NoneType]
    if len(arguments) != 1 or len(typing.get_args(annotation)) != 2:
        return Unset
    return arguments[0]


def _element(annotation):
    """
    decompose an element annotation into (scalar type, optional).
    """
    if annotation in _SCALARS:
        return annotation, False
    if (inner := _optional(annotation)) in _SCALARS:
        return inner, True
    raise TypeError("unsupported value type %r" % (annotation,))


_T = typing.TypeVar("_T")


class Variable(typing.Generic[_T]):
    """
    Caller-owned storage for one option binding.

    The declared type is one of
    - bool                       (flags)
    - str, int, float            (single values)
    - int | None, float | None   (optional values; str | None is accepted too)
    - list[T] with T any of the above except bool

    When no initial value is given, bool starts as False, scalars as their
    zero value, optionals as None and lists as a fresh empty list. A list
    given as initial value is used in place.
    """
    __slots__ = ("_type", "value")

    @property
    def type(self):
        return self._type

    def __init__(self, type=str, value=Unset, /):
        if type is bool:
            initial = False
        elif typing.get_origin(type) is list:
            arguments = typing.get_args(type)
            if len(arguments) != 1:
                raise TypeError("list variables must declare exactly one element type")
            _element(arguments[0])
            if value is not Unset and not isinstance(value, MutableSequence):
                raise TypeError("list variables must be initialized with a mutable sequence")
            initial = []
        else:
            scalar, optional = _element(type)
            initial = None if optional else scalar()
        self._type = type
        self.value = coalesce(value, initial)

    def __repr__(self):
        return "Variable(%s, %r)" % (getattr(self._type, "__name__", None) or repr(self._type), self.value)

    def __rich_repr__(self):
        yield "type", self._type
        yield "value", self.value


class Binder(ABC):
    """
    base binder: store a flag value or a parsed token into caller storage.
    """
    kind = Unset

    def default_apply(self):
        raise TypeError("%s cannot be applied without a value" % type(self).__name__)

    @abstractmethod
    def parse_apply(self, text, /):
        """
        convert `text` and store it; return False when it does not convert.
        """


class FlagBinder(Binder):
    kind = OptionKind.FLAG

    def __init__(self, variable, /):
        self._variable = variable

    def default_apply(self):
        self._variable.value = True

    def parse_apply(self, text, /):
        self.default_apply()
        return True


class ValueBinder(Binder):
    kind = OptionKind.VALUE

    def __init__(self, variable, type, /):
        self._variable = variable
        self._type = type

    def parse_apply(self, text, /):
        try:
            self._variable.value = convert(self._type, text)
        except ValueError:
            return False
        return True


class OptionalBinder(ValueBinder):
    """
    binder for `T | None` storage: a parsed value replaces the absent state.
    """


class ListBinder(Binder):
    """
    binder for `list[T]` storage: each parsed value is appended to the list
    the variable holds when the value arrives.
    """
    kind = OptionKind.LIST

    def __init__(self, variable, type, /):
        self._variable = variable
        self._type = type

    def parse_apply(self, text, /):
        try:
            element = convert(self._type, text)
        except ValueError:
            return False
        self._variable.value.append(element)
        return True


def bind(target, /):
    """
    build the binder matching a Variable (or a bare list, bound as list[str]).

    raises TypeError for any other target.
    """
    if isinstance(target, MutableSequence) and not isinstance(target, str):
        return ListBinder(Variable(list[str], target), str)
    if not isinstance(target, Variable):
        raise TypeError("bind() argument must be a Variable or a list")
    if (declared := target.type) is bool:
        return FlagBinder(target)
    if typing.get_origin(declared) is list:
        scalar, _ = _element(typing.get_args(declared)[0])
        return ListBinder(target, scalar)
    scalar, optional = _element(declared)
    if optional:
        return OptionalBinder(target, scalar)
    return ValueBinder(target, scalar)


__all__ = (
    "OptionKind",
    "Variable",
    "Binder",
    "FlagBinder",
    "ValueBinder",
    "OptionalBinder",
    "ListBinder",
    "bind",
    "convert",
)
