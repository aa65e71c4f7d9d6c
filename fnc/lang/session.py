"""Session control for the fn front-end. Lexes and parses either a whole source file or, in command-line mode, the
chunks typed into the shell.
"""

import logging

from fnc.lang.error import GenericException
from fnc.lang.lexical import lex
from fnc.lang.syntactic import parse
from fnc.lang.tree import MODULE_NAME, Module

logger = logging.getLogger(__name__)


class Session:
    """Governs an fn session: every Function parsed so far, plus the tokens of the last translation unit."""
    SH_FILE = "<in>"  # command-line interpreter filename

    def __init__(self, error_handler, path, cmd_line):
        self.error_handler = error_handler
        self.error_handler.register_file(path)

        self.path = path          # used for error messages
        self.cmd_line = cmd_line  # whether or not in command-line mode

        self.tokens = []     # tokens of the most recently added source
        self.functions = []  # every Function parsed in this session, in order
        self.results = []    # Modules not yet popped, one per add

        if self.cmd_line:
            self.error_handler.fatal = False

        if path != Session.SH_FILE:
            try:
                with open(path, "r", encoding="utf-8", errors="replace") as file:  # bad bytes are discarded by lex
                    source = file.read()
            except OSError:
                raise GenericException("'{}' could not be opened", path, diagnosis=False)

            logger.debug("read %d characters from %s", len(source), path)
            self.add(source)

        elif not cmd_line:
            raise GenericException("'<in>' is a reserved filename")

    @staticmethod
    def preprocess_line(line, prev=""):
        """Preprocesses a line from the command-line, joining it onto prev (the lines buffered so far). Returns the joined
        text and whether a line continuation is necessary because a block is still open.
        """
        line = line.rstrip()
        if prev:
            line = prev + "\n" + line
        return line, line.count("{") > line.count("}")

    def add(self, source, line_num=None):
        """Lexes and parses source as one translation unit. Raises on the first grammar violation, in which case the
        session is left unchanged.
        """
        snippet = " ".join(source.split()) if self.cmd_line else ""
        self.error_handler.register_line(self.path, snippet, line_num)  # in case error is raised

        tokens = lex(source)
        logger.debug("lexed %d tokens from %s", len(tokens), self.path)
        module = parse(tokens)
        logger.debug("parsed %d functions from %s", len(module.functions), self.path)

        self.tokens = tokens
        self.functions.extend(module.functions)
        self.results.append(module)

        self.error_handler.remove_line(self.path)  # error was not raised
        return module

    def pop(self):
        """Returns and forgets the oldest Module not yet popped."""
        return self.results.pop(0)

    @property
    def module(self):
        """Module holding every Function parsed in this session."""
        return Module(MODULE_NAME, list(self.functions))
