"""
optbind faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing parse
  failure. Codes are grouped by domain to keep copy consistent and make
  logs/searches predictable.
- ParseFault: base type carrying message + options that knows how to render
  itself through rich (plain or colorful, plain lines or a fancy panel).
- OptionWarning: base type for registration-time diagnostics that do not stop
  the program (emitted through the warnings module).

Integration
- The engine and resolver raise faults; the parser façade catches them at the
  parse()/check_required() boundary and keeps the fault for error()/fault.
- Nothing raised here crosses the public parse boundary for malformed input.
"""
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping (by high-level domain)
    - switches (options/flags) (1111x)
      • MISSING_NAME, UNKNOWN_OPTION, UNEXPECTED_VALUE, BUNDLE_MIX,
        MISSING_VALUE
    - values (1112x)
      • UNEXPECTED_POSITIONAL, INVALID_VALUE, REQUIRED_OPTION

    normalize() allows host remapping to custom labels while keeping
    code-stability.
    """
    # --- switch/flag/option errors (1111x) ---
    MISSING_NAME                = 11111
    UNKNOWN_OPTION              = 11112
    UNEXPECTED_VALUE            = 11113
    BUNDLE_MIX                  = 11114
    MISSING_VALUE               = 11117

    # --- positional/value errors (1112x) ---
    UNEXPECTED_POSITIONAL       = 11121
    INVALID_VALUE               = 11123
    REQUIRED_OPTION             = 11125

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(sys.modules.get("__main__"), "__codes__", {}).get(self, self.value))


class ParseFault(Exception):
    """
    base class of every parse failure.

    the message is the exact text reported by CommandLineParser.error(); the
    options carry rendering context (title, code, hint, token, program,
    colorful, fancy).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    @property
    def token(self):
        return self.options.get("token")

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        main = sys.modules.get("__main__")

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        colorful = self.options.get("colorful", False)

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        header = Text.assemble(
            "[ ",
            text(self.options.get("program") or "error", styler("prog-name")),
            " — ",
            text(self.code.normalize() if self.code else "", styler("code")),
            " | ",
            text(str(self.options.get("title", "")).title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))

        renders = [message]
        if hint := self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

        if self.options.get("fancy", False):
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def configure(self, **overrides):
        """
        return a copy of this fault with merged rendering options.
        """
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownOptionFault(ParseFault): ...
class MissingValueFault(ParseFault): ...
class UnexpectedValueFault(ParseFault): ...
class InvalidValueFault(ParseFault): ...
class UnexpectedPositionalFault(ParseFault): ...
class MissingNameFault(ParseFault): ...
class BundleMixFault(ParseFault): ...
class RequiredOptionFault(ParseFault): ...


class OptionWarning(Warning):
    """
    registration-time diagnostic; never stops parsing.
    """

    def __init__(self, message, /, **options):
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)


class DuplicatePositionWarning(OptionWarning): ...


__all__ = (
    "FaultCode",
    "ParseFault",
    "UnknownOptionFault",
    "MissingValueFault",
    "UnexpectedValueFault",
    "InvalidValueFault",
    "UnexpectedPositionalFault",
    "MissingNameFault",
    "BundleMixFault",
    "RequiredOptionFault",
    "OptionWarning",
    "DuplicatePositionWarning",
)
