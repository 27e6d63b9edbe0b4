r"""
optbind lexer and resolver.

purpose
- classify(token) turns one raw argv token into a lexeme without looking at
  the registry:
  • Ignored()          '' and a lone '-' or '--'
  • Bare(text)         anything not starting with '-'
  • Long(name, value)  '--name' or '--name=value'
  • Short(char, value) '-x' or '-x=value'
  • Bundle(chars)      '-xyz' (several short flags, no inline value)
  value is None when the token carries no '='; '' when it ends with '='.
- Resolver maps Long/Short/Bundle lexemes to registry options, honoring the
  unknown-skipping mode.

faults
- '--=x' / '-=x'  → MissingNameFault ("missing option name: <token>")
- '-xy=1'         → BundleMixFault ("flag/argument mix disallowed: <token>")
- unknown name    → UnknownOptionFault ("unknown option: --name" / "-x"),
                    unless unknown options are skipped
- non-flag inside a bundle → MissingValueFault ("option requires value: <char>")
"""
from typing import NamedTuple, final

from .binders import OptionKind
from .faults import *


@final
class Ignored(NamedTuple):
    pass


@final
class Bare(NamedTuple):
    text: str


@final
class Long(NamedTuple):
    name: str
    value: str | None = None


@final
class Short(NamedTuple):
    char: str
    value: str | None = None


@final
class Bundle(NamedTuple):
    chars: str


def classify(token, /):
    """
    classify one raw token; raises MissingNameFault or BundleMixFault.
    """
    if not token:
        return Ignored()
    if not token.startswith("-"):
        return Bare(token)

    long = token.startswith("--")
    body = token[2:] if long else token[1:]
    if not body:
        return Ignored()

    name, equals, value = body.partition("=")
    if not name:
        raise MissingNameFault(
            "missing option name: %s" % token,
            title="missing option name",
            code=FaultCode.MISSING_NAME,
            hint="write the option name before '=' (for example: --name=value)",
            token=token,
        )
    value = value if equals else None

    if long:
        return Long(name, value)
    if len(name) == 1:
        return Short(name, value)
    if value is not None:
        raise BundleMixFault(
            "flag/argument mix disallowed: %s" % token,
            title="flag and value mixed",
            code=FaultCode.BUNDLE_MIX,
            hint="bundled short flags cannot take a value; pass -x=value on its own",
            token=token,
        )
    return Bundle(name)


class Resolver:
    """
    Resolve lexemes against a registry.

    With skip_unknown, unknown long and single short options resolve to None
    and unknown characters inside a bundle are dropped.
    """

    def __init__(self, registry, *, skip_unknown=False):
        self._registry = registry
        self._skip_unknown = skip_unknown

    def _unknown(self, display, token):
        raise UnknownOptionFault(
            "unknown option: %s" % display,
            title="unknown option",
            code=FaultCode.UNKNOWN_OPTION,
            hint="run with --help to see the allowed options",
            token=token,
        )

    def resolve(self, lexeme, token, /):
        """
        return the Option named by a Long or Short lexeme, or None when it is
        unknown and skipped.
        """
        match lexeme:
            case Long(name=name):
                option = self._registry.by_name(name)
                display = "--" + name
            case Short(char=char):
                option = self._registry.by_flag(char)
                display = "-" + char
            case _:
                raise TypeError("resolve() expects a Long or Short lexeme")
        if option is None and not self._skip_unknown:
            self._unknown(display, token)
        return option

    def bundle(self, lexeme, token, /):
        """
        yield the flag options of a bundle one character at a time.

        options are yielded lazily so that flags preceding a faulty
        character are applied before the fault is raised.
        """
        for char in lexeme.chars:
            option = self._registry.by_flag(char)
            if option is None:
                if self._skip_unknown:
                    continue
                self._unknown("-" + char, token)
            if option.kind is not OptionKind.FLAG:
                raise MissingValueFault(
                    "option requires value: %s" % char,
                    title="option requires value",
                    code=FaultCode.MISSING_VALUE,
                    hint="pass -%s on its own followed by its value" % char,
                    token=token,
                )
            yield option


__all__ = (
    "Ignored",
    "Bare",
    "Long",
    "Short",
    "Bundle",
    "classify",
    "Resolver",
)
