"""Parses .fn files or runs in command-line mode, using the error handling context manager. Called from the fnc
console script.
"""

import argparse
import logging

from fnc.lang.error import ErrorHandler
from fnc.lang.session import Session
from fnc.lang.shell import Shell

logger = logging.getLogger(__name__)


def main(argv=None):
    """Runs the fn front-end. Called from the fnc console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="fnc", description="Lex and parse fn source into a module.")
        parser.add_argument("file", help="file to parse (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("--tokens", action="store_true", help="print the token sequence before the module")
        parser.add_argument("-v", "--verbose", action="store_true", help="log debugging information")
        args = parser.parse_args(argv)

        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                            format="%(levelname)s %(name)s: %(message)s")

        if args.file is not None:
            logger.debug("parsing %s", args.file)
            sess = Session(error_handler, args.file, cmd_line=False)

            if args.tokens:
                print(sess.tokens)
            print(sess.module.display())

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True)).cmdloop()


if __name__ == "__main__":
    main()
