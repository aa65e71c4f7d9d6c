"""Error handling for the fn front-end. Only GenericExceptions should be encountered during lexing and parsing: if
another type of error is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

Parsing is fail-fast. The first GenericException raised by a grammar rule aborts the whole parse, and nothing tries to
resynchronize or collect further errors.
"""

import re
import sys

from termcolor import colored


class GenericException(Exception):
    """Templates an error message so that it can be used to throw an fn error. msg is a str.format template and exprs
    are the snippets substituted into it; exprs[0] should be the offending snippet.
    """

    def __init__(self, msg, exprs=None, diagnosis=True, internal=False):
        if exprs is None:
            exprs = ""
        if isinstance(exprs, str):
            exprs = [exprs]

        super().__init__(msg.format(*exprs))
        self.msg = msg.format(*(colored(expr, attrs=["bold"]) for expr in exprs))  # color expr snippets
        self.expr = exprs[0] if exprs else ""

        self.diagnosis = diagnosis
        self.internal = internal


class ExpectedTokenError(GenericException):
    """A grammar rule required a token that is not next in the sequence (including the end of input)."""

    def __init__(self, expected, found):
        super().__init__("expected " + expected + ", found '{}'", found)
        self.expected = expected


class UnknownTypeError(GenericException):
    """A type name other than the supported ones was used in a declaration."""

    def __init__(self, name):
        super().__init__("unknown type '{}'", name)


class UnknownStatementError(GenericException):
    """A statement started with an identifier that is neither print_int nor return."""

    def __init__(self, name):
        super().__init__("expected let, print_int, or return, found '{}'", name)


class LiteralError(GenericException):
    """Integer literal text could not be converted to the target integer type."""

    def __init__(self, text):
        super().__init__("invalid integer literal '{}'", text)


class ErrorHandler:
    """Context manager that will silently suppress Python errors and report fn errors instead."""
    ERROR = "red"

    def __init__(self, fatal=True):
        self.fatal = fatal
        self.traceback = {}

    def register_file(self, path):
        """Registers path in traceback."""
        self.traceback[path] = (None, None)

    def register_line(self, path, line, line_num):
        """Registers line in traceback given path. Should be called prior to Session add. An empty line marks path as
        being processed without a snippet to show.
        """
        self.traceback[path] = (line, line_num)

    def remove_line(self, path):
        """Removes line from traceback given path. Should be called after successful Session add."""
        self.traceback[path] = (None, None)

    @staticmethod
    def diagnose(error, line):
        """Returns line with the offending part of error.expr highlighted and underlined, or None if it is absent. An
        occurrence standing alone as a token is preferred over one inside a longer name.
        """
        if not error.expr:
            return None
        match = re.search(r"(?<![A-Za-z0-9_])" + re.escape(error.expr) + r"(?![A-Za-z0-9_])", line)
        start = match.start() if match else line.find(error.expr)
        if start == -1:
            return None
        end = start + len(error.expr)

        diagnosis = "  " + line[:start]
        diagnosis += colored(line[start:end], ErrorHandler.ERROR, attrs=["bold"])
        diagnosis += line[end:] + "\n"

        diagnosis += "  " + " " * start
        diagnosis += colored("^" + "~" * (end - start - 1), ErrorHandler.ERROR, attrs=["bold"])

        return diagnosis

    def throw(self, error):
        """Throws error using error and self.traceback. error must be a GenericException, and self.traceback must be a
        dict of file: (line, line_num) representing origination of error.
        """
        error_msg = ""
        last_line = None
        for file, (line, line_num) in self.traceback.items():  # dicts are insertion-ordered
            if line is None:
                continue  # registered but not being processed
            error_msg += f"  File '{file}', line {line_num}:\n" if line_num else f"  File '{file}':\n"
            if line:
                error_msg += f"    {line}\n"
                last_line = line

        if error.internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])

        error_msg += colored("error: ", ErrorHandler.ERROR, attrs=["bold"]) + error.msg
        print(error_msg)

        if not error.internal and last_line and error.diagnosis:
            diagnosis = ErrorHandler.diagnose(error, last_line)
            if diagnosis:
                print(diagnosis)

        if self.fatal:
            sys.exit(1)
        self.traceback = {path: (None, None) for path in self.traceback}  # keep files, forget offending lines

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.throw(GenericException("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.throw(GenericException("maximum nesting depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, GenericException):
            self.throw(exc_val)
        elif exc_type is not None:
            self.throw(GenericException("unknown error: '{}'", f"{exc_type.__name__}: {exc_val}", internal=True))
            do_exit = True

        return not do_exit
