"""
optbind option registry.

Overview
- parse_spec(spec)
  • Split a registration string "[+]<name>[,<flags>[,<hint>]]" into
    (required, name, flags, hint).
- Option
  • One registered binding: kind, required-ness, long name, short-flag
    characters, display hint, help text, positional slot and binder.
  • Every field is fixed at registration except `parsed`.
- Registry
  • Ordered collection of options. Registration order is load-bearing: it is
    the lookup priority for duplicate names and positional tie-breaks.

Positions
- 0 marks a named (non-positional) option.
- N > 0 binds the N-th bare token.
- CATCH_ALL (-1) accepts every bare token without an exact slot; list only.
"""
import warnings
from typing import NamedTuple

from .binders import OptionKind, bind
from .faults import DuplicatePositionWarning
from .utils import *

CATCH_ALL = -1


class Spec(NamedTuple):
    required: bool
    name: str
    flags: str
    hint: str


def parse_spec(spec, /):
    """
    parse a registration string.

    grammar
    - a leading '+' marks the option required and is stripped.
    - first field: long name (may be empty).
    - second field: short-flag characters, each matched individually.
    - third field: display hint; it keeps any further commas verbatim.

    examples
    - "help,h"        -> Spec(False, "help", "h", "")
    - "+level,l,N"    -> Spec(True, "level", "l", "N")
    - "+,,path"       -> Spec(True, "", "", "path")
    """
    if not isinstance(spec, str):
        raise TypeError("option spec must be a string")
    required = spec.startswith("+")
    if required:
        spec = spec[1:]
    name, _, rest = spec.partition(",")
    flags, _, hint = rest.partition(",")
    return Spec(required, name, flags, hint)


class Option:
    """
    One registered option binding.

    Read-only fields mirror the registration; `parsed` records that a value
    (or the flag itself) was applied during the last parse.
    """

    kind = mirror("kind")
    required = mirror("required")
    name = mirror("name")
    flags = mirror("flags")
    hint = mirror("hint")
    help = mirror("help")
    position = mirror("position")
    binder = mirror("binder")

    def __init__(self, binder, spec, help="", position=0):
        if not isinstance(help, str):
            raise TypeError("option help must be a string")
        if not isinstance(position, int) or isinstance(position, bool):
            raise TypeError("option position must be an integer")
        if position < 0 and position != CATCH_ALL:
            raise ValueError("option position must be positive, 0 or CATCH_ALL")
        if position == CATCH_ALL and binder.kind is not OptionKind.LIST:
            raise ValueError("only list options can catch all positional arguments")
        if position and binder.kind is OptionKind.FLAG:
            raise ValueError("flags cannot be positional")

        self._required, self._name, self._flags, self._hint = parse_spec(spec)
        self._kind = binder.kind
        self._binder = binder
        self._help = help
        self._position = position
        self.parsed = False

    @property
    def named(self):
        """
        true when the option can be addressed by --name or -x.
        """
        return bool(self._name or self._flags)

    def __repr__(self):
        return "option(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())

    def __rich_repr__(self):
        yield "kind", self._kind
        yield "name", self._name
        yield "flags", self._flags
        yield "hint", self._hint
        yield "position", self._position
        yield "required", self._required
        yield "parsed", self.parsed


class Registry:
    """
    Ordered option table.

    Lookups are first-registered-wins; no duplicate detection is performed
    on names. Two options sharing a position is a caller contract violation
    reported with DuplicatePositionWarning.
    """

    def __init__(self):
        self._options = []

    def register(self, target, spec, help="", position=0):
        """
        bind the target, build its Option and append it; returns the Option.
        """
        option = Option(bind(target), spec, help, position)
        if position and any(other.position == position for other in self._options):
            warnings.warn(DuplicatePositionWarning(
                "position %d is already claimed; the first registered option keeps it" % position,
                position=position,
                option=option,
            ), stacklevel=3)
        self._options.append(option)
        return option

    def __iter__(self):
        return iter(self._options)

    def __len__(self):
        return len(self._options)

    def by_name(self, name, /):
        for option in self._options:
            if option.name == name:
                return option
        return None

    def by_flag(self, char, /):
        for option in self._options:
            if char in option.flags:
                return option
        return None

    def by_position(self, position, /):
        """
        exact slot first; otherwise the first catch-all option, if any.
        """
        fallback = None
        for option in self._options:
            if option.position == position:
                return option
            if option.position == CATCH_ALL and fallback is None:
                fallback = option
        return fallback

    @property
    def has_positionals(self):
        return any(option.position for option in self._options)

    def named(self):
        return [option for option in self._options if option.named]

    def positionals(self):
        return [option for option in self._options if not option.named]

    def reset(self):
        for option in self._options:
            option.parsed = False


__all__ = (
    "CATCH_ALL",
    "Spec",
    "parse_spec",
    "Option",
    "Registry",
)
