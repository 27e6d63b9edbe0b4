"""
optbind parse engine.

The engine drives argv tokens through the lexer/resolver and writes values
through the option binders. Its state is explicit and replaced once per token:

    Scanning                  no option is waiting for a value
    AwaitingValue(option)     a value option consumed its name; the next bare
                              token is its value
    SkippingUnknownValue      an unknown option was skipped; the next bare
                              token is its would-be value and is discarded

Greedy lists
- When no registered option has a positional slot, a list option keeps
  consuming the bare tokens that follow it until the next dash token.
- When any positional slot exists, list options take one value per name.

The engine fails fast: the first fault propagates out of run() and values
applied before it stay applied.
"""
from typing import NamedTuple, final

from .binders import OptionKind
from .faults import *
from .lexer import *


@final
class Scanning:
    __slots__ = ()

    def __repr__(self):
        return "Scanning"


@final
class AwaitingValue(NamedTuple):
    option: object


@final
class SkippingUnknownValue:
    __slots__ = ()

    def __repr__(self):
        return "SkippingUnknownValue"


SCANNING = Scanning()
SKIPPING = SkippingUnknownValue()


class Engine:
    """
    one parse invocation over a registry.

    attributes
    - state: current state (see module docstring).
    - position: number of positional tokens consumed so far.
    """

    def __init__(self, registry, *, skip_unknown=False):
        self._registry = registry
        self._resolver = Resolver(registry, skip_unknown=skip_unknown)
        self._greedy = not registry.has_positionals
        self.state = SCANNING
        self.position = 0

    def run(self, tokens, /):
        """
        consume every token (argv without the program name), then check for
        an option left without its value.
        """
        last = None
        for token in tokens:
            self.state = self.step(token)
            last = token
        self.finish(last)

    def step(self, token, /):
        """
        transition function: return the state that follows `token`.
        """
        if not token:
            return self.state
        if not token.startswith("-"):
            return self._bare(token)
        return self._dashed(token)

    def finish(self, last, /):
        match self.state:
            case AwaitingValue(option=option) if not option.parsed:
                raise MissingValueFault(
                    "option requires value: %s" % last,
                    title="option requires value",
                    code=FaultCode.MISSING_VALUE,
                    hint="pass a value after %s" % last,
                    token=last,
                )

    def _apply(self, option, text):
        option.parsed = True
        if not option.binder.parse_apply(text):
            raise InvalidValueFault(
                "invalid option value: %s" % text,
                title="invalid option value",
                code=FaultCode.INVALID_VALUE,
                hint="the whole value must convert to the option type",
                token=text,
            )

    def _bare(self, token):
        match self.state:
            case SkippingUnknownValue():
                return SCANNING
            case AwaitingValue(option=option):
                self._apply(option, token)
                if option.kind is OptionKind.LIST and self._greedy:
                    return self.state
                return SCANNING

        self.position += 1
        option = self._registry.by_position(self.position)
        if option is None:
            raise UnexpectedPositionalFault(
                "positional arg not allowed: %s" % token,
                title="positional arg not allowed",
                code=FaultCode.UNEXPECTED_POSITIONAL,
                hint="pass it as the value of an option (for example: --name=%s)" % token,
                token=token,
            )
        self._apply(option, token)
        return SCANNING

    def _dashed(self, token):
        # a dash token always ends any pending value, even a lone '-' or '--'
        match lexeme := classify(token):
            case Ignored():
                return SCANNING
            case Bundle():
                for option in self._resolver.bundle(lexeme, token):
                    option.parsed = True
                    option.binder.default_apply()
                return SCANNING

        option = self._resolver.resolve(lexeme, token)
        if option is None:
            return SKIPPING

        if option.kind is OptionKind.FLAG:
            if lexeme.value is not None:
                raise UnexpectedValueFault(
                    "option value unexpected: %s" % token,
                    title="option value unexpected",
                    code=FaultCode.UNEXPECTED_VALUE,
                    hint="remove everything from '='",
                    token=token,
                )
            option.parsed = True
            option.binder.default_apply()
            return SCANNING

        if lexeme.value is None:
            return AwaitingValue(option)

        self._apply(option, lexeme.value)
        if option.kind is OptionKind.LIST and self._greedy:
            return AwaitingValue(option)
        return SCANNING


__all__ = (
    "Scanning",
    "AwaitingValue",
    "SkippingUnknownValue",
    "SCANNING",
    "SKIPPING",
    "Engine",
)
