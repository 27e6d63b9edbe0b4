"""
optbind command-line parser.

What this module provides
- CommandLineParser: the embeddable façade over the registry, the engine and
  the help formatter. Setters are chainable.
- ExitCode: exit-status convention for programs built on the parser.

Quick start
    from optbind import CommandLineParser, Variable, CATCH_ALL

    help = Variable(bool)
    level = Variable(int | None)
    files = Variable(list[str])

    parser = (
        CommandLineParser()
        .add_flag(help, "help,h", "print help")
        .add(level, "+level,l", "compression level")
        .add(files, "+,,path", "file path(s)", CATCH_ALL)
    )
    if not parser.parse():
        parser.print_error()

Contract
- parse() and check_required() never raise for malformed input; they return
  False and keep the fault for error()/fault.
- parse() resets every `parsed` mark and the previous fault on entry, so a
  parser can be reused. Bound variables are caller-owned and keep whatever
  values the caller left in them.
- A parser instance is not thread-safe.
"""
import sys
from enum import IntEnum

from rich.console import Console

from .faults import *
from .engine import Engine
from .help import HelpFormatter, format_name
from .registry import Registry
from .utils import *


class ExitCode(IntEnum):
    OK = 0
    FAILURE = 1


class CommandLineParser:
    """
    Register typed option bindings, parse argv into them, report errors and
    render help.

    options
    - colorful: apply the rich palette in print_help()/print_error().
    - fancy: render faults inside a rich Panel.
    """

    def __init__(self, *, colorful=True, fancy=False):
        self._registry = Registry()
        self._program = Unset
        self._derived = Unset
        self._skip_unknown = False
        self._fault = None
        self.colorful = bool(colorful)
        self.fancy = bool(fancy)

    @property
    def registry(self):
        return self._registry

    @property
    def program(self):
        """
        program name shown in help and faults.

        resolution: set_program() > basename of argv[0] from the last parse()
        > __main__.__prog__ > basename of sys.argv[0].
        """
        if self._program is not Unset:
            return self._program
        if self._derived is not Unset:
            return self._derived
        if (prog := getattr(sys.modules.get("__main__"), "__prog__", None)) is not None:
            return prog
        return basename(sys.argv[0]) if sys.argv else ""

    @property
    def skips_unknown(self):
        return self._skip_unknown

    @property
    def fault(self):
        return self._fault

    def add_flag(self, variable, spec, help=""):
        """
        register a presence-only option bound to a bool variable.
        """
        if getattr(variable, "type", None) is not bool:
            raise TypeError("add_flag() expects a Variable(bool)")
        self._registry.register(variable, spec, help)
        return self

    def add(self, variable, spec, help="", position=0):
        """
        register a value or list option; position > 0 binds the N-th bare
        token and CATCH_ALL binds every bare token without an exact slot.
        """
        if getattr(variable, "type", None) is bool:
            raise TypeError("add() cannot bind a bool variable; use add_flag()")
        self._registry.register(variable, spec, help, position)
        return self

    def set_program(self, name):
        if not isinstance(name, str):
            raise TypeError("program name must be a string")
        self._program = name
        return self

    def skip_unknown(self, value=True):
        self._skip_unknown = bool(value)
        return self

    def parse(self, argv=None):
        """
        parse argv (sys.argv when None; argv[0] is the program path).

        returns True on success; on failure error() describes the first fault
        and values bound before it remain applied.
        """
        argv = list(sys.argv if argv is None else argv)
        self._registry.reset()
        self._fault = None
        if argv:
            self._derived = basename(argv[0])

        engine = Engine(self._registry, skip_unknown=self._skip_unknown)
        try:
            engine.run(argv[1:])
        except ParseFault as fault:
            self._fault = fault
            return False
        return True

    def check_required(self):
        """
        fail on the first required option (registration order) never parsed.
        """
        for option in self._registry:
            if not option.required or option.parsed:
                continue
            name = format_name(option)
            self._fault = RequiredOptionFault(
                "required option missing: %s" % name,
                title="required option missing",
                code=FaultCode.REQUIRED_OPTION,
                hint="pass %s" % name,
                token=name,
            )
            return False
        return True

    def error(self):
        return self._fault.message if self._fault is not None else ""

    def formatter(self, *, colorful=False):
        return HelpFormatter(self._registry, self.program, colorful=colorful)

    def get_help(self):
        return str(self.formatter())

    def print_help(self, *, stderr=False):
        Console(stderr=stderr, highlight=False).print(self.formatter(colorful=self.colorful), end="", soft_wrap=True)

    def print_error(self):
        if self._fault is None:
            return
        Console(stderr=True, highlight=False).print(self._fault.configure(
            program=self.program,
            colorful=self.colorful,
            fancy=self.fancy,
        ))

    def __rich__(self):
        return self.formatter(colorful=self.colorful)


__all__ = (
    "ExitCode",
    "CommandLineParser",
)
