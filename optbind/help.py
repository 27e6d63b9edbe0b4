"""
optbind help formatter.

Layout (plain text, what get_help() returns)

    usage: tool [options] path...
    allowed options:
      -h [ --help ]              : print help
      -c [ --compression ] level : compression level
    positional arguments:
      path : file path(s)

- usage: one item per option without long name and short flags; bracketed
  unless required, suffixed with '...' when it is a list.
- names: '-<flags>', then '[ --<name> ]' (or '--<name>' alone when there are
  no flags), then the hint (or 'arg') unless the option is a flag.
  Positional names are their hint, or 'arg<position>'.
- each block pads names to its own longest name, capped at NAME_COLUMN_LIMIT.

The same structure is produced as a rich Text; the plain string is its
`.plain` so both renderings stay identical.

Palette keys
- usage-label, program-name, usage-section, group-label, option-name,
  flag-name, metavar, separator, argument-description

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
"""
import sys
from collections import defaultdict

from rich.text import Text

from .binders import OptionKind

NAME_COLUMN_LIMIT = 30


def _segments(option):
    """
    yield (fragment, palette key) pairs of an option display name.
    """
    if not option.named:
        yield option.hint or "arg%d" % option.position, "metavar"
        return
    style = "flag-name" if option.kind is OptionKind.FLAG else "option-name"
    if option.flags:
        yield "-" + option.flags, style
    if option.name:
        if option.flags:
            yield " [ ", ""
        yield "--" + option.name, style
        if option.flags:
            yield " ]", ""
    if option.kind is not OptionKind.FLAG:
        yield " ", ""
        yield option.hint or "arg", "metavar"


def format_name(option, /):
    """
    plain display name of an option (used by help and required-option faults).
    """
    return "".join(fragment for fragment, _ in _segments(option))


class HelpFormatter:
    """
    Render a registry as usage + option listing.

    parameters
    - registry: Registry (iterated in registration order)
    - program: str (shown after 'usage:')
    - colorful: bool (apply the palette; plain Text otherwise)
    """

    def __init__(self, registry, program, *, colorful=False):
        self._registry = registry
        self._program = program
        self._colorful = colorful

    def _styles(self):
        return defaultdict(str, {
            "usage-label": "bold #00E6FF",  # CYAN → signature info color
            "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
            "usage-section": "bold #36C5F0",  # SKY-BLUE → softer than cyan
            "group-label": "bold #FFFFFF",  # Pure white headers
            "option-name": "bold #00E6FF",  # CYAN for options
            "flag-name": "bold #22C55E",  # GREEN for flags
            "metavar": "bold #FFD600",  # AMBER for parameters
            "separator": "#4B5563",  # Slate
            "argument-description": "#9CA3AF",  # Muted gray
        } | getattr(sys.modules.get("__main__"), "__styles__", {}))

    def _name(self, option, styles):
        name = Text()
        for fragment, key in _segments(option):
            name.append(fragment, styles[key] if self._colorful and key else "")
        return name

    def _block(self, label, options, styles):
        block = Text()
        block.append(label, styles["group-label"] if self._colorful else "").append(":\n")
        names = [self._name(option, styles) for option in options]
        column = min(max(map(len, names)), NAME_COLUMN_LIMIT)
        for option, name in zip(options, names):
            block.append("  ").append(name)
            if len(name) < column:
                block.append(" " * (column - len(name)))
            if option.help:
                block.append(" : ", styles["separator"] if self._colorful else "")
                block.append(option.help, styles["argument-description"] if self._colorful else "")
            block.append("\n")
        return block

    def render(self):
        """
        build the help as a rich Text.
        """
        styles = self._styles()

        def styler(key):
            return styles[key] if self._colorful else ""

        result = Text()
        result.append("usage", styler("usage-label")).append(": ")
        result.append(self._program, styler("program-name"))
        result.append(" [options]", styler("usage-section"))

        named = self._registry.named()
        positionals = self._registry.positionals()

        for option in positionals:
            result.append(" ")
            if not option.required:
                result.append("[")
            result.append(self._name(option, styles))
            if option.kind is OptionKind.LIST:
                result.append("...")
            if not option.required:
                result.append("]")
        result.append("\n")

        if named:
            result.append(self._block("allowed options", named, styles))
        if positionals:
            result.append(self._block("positional arguments", positionals, styles))
        return result

    def __rich__(self):
        return self.render()

    def __str__(self):
        return self.render().plain


__all__ = (
    "NAME_COLUMN_LIMIT",
    "HelpFormatter",
    "format_name",
)
