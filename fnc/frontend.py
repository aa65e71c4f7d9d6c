"""Front-end for the fn toy language.

For reference:
- "fn language": functions over Int values with 'let', 'print_int' and 'return' statements
- "translation unit": one source string, producing one Module

Basic program flow:
    1. Lexer: turns source text into a token sequence ending in EndOfFile (see fnc/lang/lexical.py)
    2. Parser: recursive descent over the tokens, one rule per non-terminal (see fnc/lang/syntactic.py)
        - Fails on the first grammar violation, with no partial Module
    3. Nothing else: there is no type checker, code generator or interpreter behind the AST

"""

from fnc.lang.lexical import lex
from fnc.lang.syntactic import parse


def parse_source(source):
    """Returns the Module for source text. Raises a GenericException on the first grammar violation."""
    return parse(lex(source))
