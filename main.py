import sys

from rich.pretty import pprint

from optbind import *


def main(argv=None):
    help = Variable(bool)
    compression = Variable(int | None)
    files = Variable(list[str])

    parser = (
        CommandLineParser()
        .add_flag(help, "help,h", "print help")
        .add(compression, "+compression,c,level", "compression level")
        .add(files, "+,,path", "file path(s)", CATCH_ALL)
    )

    if not parser.parse(argv):
        parser.print_error()
        parser.print_help(stderr=True)
        return ExitCode.FAILURE
    if help.value:
        parser.print_help()
        return ExitCode.OK
    if not parser.check_required():
        parser.print_error()
        parser.print_help(stderr=True)
        return ExitCode.FAILURE
    if compression.value is not None:
        pprint({"compression": compression.value, "files": files.value})
    return ExitCode.OK


if __name__ == '__main__':
    sys.exit(main())
