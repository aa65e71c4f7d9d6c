"""Handles interactive/command-line mode for the fn front-end. Uses cmd as backend."""

import cmd

from fnc.lang.lexical import lex


class Shell(cmd.Cmd):
    """fn front-end shell: parses each complete chunk of input and prints the resulting Module."""
    intro = "fn front-end :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    secondary_prompt = ". "  # used for line continutations
    _tmp_prompt = "> "       # also used for prompt swapping in line continuations

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.sess = sess

        self._tmp_line = ""
        self.line_num = 0

    def default(self, line):
        """Parses arbitrary fn source, buffering lines until every block is closed."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.line_num += 1
            line, add_to_prev = self.sess.preprocess_line(line, self._tmp_line)

            if add_to_prev:
                self._tmp_line = line
                self.prompt = self.secondary_prompt
            else:
                self._tmp_line = ""
                self.prompt = self._tmp_prompt

                self.sess.add(line, self.line_num)
                if self.sess.results:
                    print(self.sess.pop().display(), file=self.stdout)

    def do_tokens(self, arg):
        """Prints the token sequence of the given source."""
        print(lex(arg), file=self.stdout)

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the fn front-end!\n\n"
              "fn is a small statically-typed language made of functions whose bodies hold \n"
              "'let', 'print_int' and 'return' statements over Int values. Each complete \n"
              "chunk of input is lexed and parsed, and the resulting module is printed.\n\n"
              "Try it out by typing 'fn main() { let x: Int = 5; print_int(x); }'. Blocks \n"
              "may span several lines. Type 'tokens <source>' to see how source is lexed.",
              file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits shell."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits shell."""
        return True
