"""Recursive-descent parser for the fn language. Each grammar rule below maps to one Parser method:

```
<module>     ::= (<function> | <any other token>)*              ; stray tokens between functions are skipped
<function>   ::= "fn" <name> <arg_defs> <block>
<arg_defs>   ::= "(" [<name> ":" <type> ("," <name> ":" <type>)* [","]] ")"
<block>      ::= "{" <statement>* "}"
<statement>  ::= "let" <name> ":" <type> "=" <expression> ";"
               | "print_int" "(" <expression> ")" ";"
               | "return" <expression> ";"
<expression> ::= <int> | <name> | <name> <call_args>
<call_args>  ::= "(" [<expression> ("," <expression>)* [","]] ")"
<type>       ::= "Int"
```

The parser keeps no state beyond its cursor into the token sequence, which is never modified. Any rule violation
raises a GenericException that aborts the whole parse.
"""

from fnc.lang import lexical
from fnc.lang.error import ExpectedTokenError, GenericException, UnknownStatementError
from fnc.lang.numerical import to_int
from fnc.lang.tree import ArgumentDefinition, Call, Function, Int, Let, Module, Name, Print, Return, Type

PRINT_INT = "print_int"
RETURN = "return"

END_OF_INPUT = "end of input"


def _found(token):
    """Describes the token a rule ran into, or the end of input if there was none."""
    return token.describe() if token is not None else END_OF_INPUT


class Parser:
    """Cursor over a token sequence with one method per non-terminal."""

    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        self.pos = 0

    def peek(self):
        """Returns the next token without consuming it, or None if the cursor is exhausted."""
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def peek_is(self, kind):
        token = self.peek()
        return token is not None and token.kind == kind

    def advance(self):
        """Consumes and returns the next token, or None if the cursor is exhausted."""
        token = self.peek()
        if token is not None:
            self.pos += 1
        return token

    def expect(self, kind, expected):
        """Consumes the next token, which must be of kind. expected describes it in the error message."""
        token = self.advance()
        if token is None or token.kind != kind:
            raise ExpectedTokenError(expected, _found(token))
        return token

    def expect_type(self):
        """Consumes a type name and resolves it to a Type."""
        return Type.from_name(self.expect(lexical.NAME, "type").text)

    def parse_module(self):
        functions = []
        while self.peek() is not None:
            if self.peek_is(lexical.FN):
                functions.append(self.parse_function())
            else:
                self.advance()
        return Module(functions=functions)

    def parse_function(self):
        self.expect(lexical.FN, "fn")
        name = self.expect(lexical.NAME, "function name").text
        args = self.parse_argument_definitions()
        body = self.parse_statements()
        return Function(name, args, body)

    def parse_argument_definitions(self):
        self.expect(lexical.LEFT_PAREN, "left paren")

        args = []
        while not self.peek_is(lexical.RIGHT_PAREN):
            name = self.expect(lexical.NAME, "name or right paren").text
            self.expect(lexical.COLON, "colon")
            args.append(ArgumentDefinition(name, self.expect_type()))
            self._separator()

        self.advance()
        return args

    def parse_statements(self):
        self.expect(lexical.LEFT_BRACE, "left brace")

        statements = []
        while not self.peek_is(lexical.RIGHT_BRACE):
            statements.append(self.parse_statement())

        self.advance()
        return statements

    def parse_statement(self):
        token = self.peek()

        if token is not None and token.kind == lexical.LET:
            self.advance()
            name = self.expect(lexical.NAME, "name").text
            self.expect(lexical.COLON, "colon")
            type_ = self.expect_type()
            self.expect(lexical.EQUAL, "equal")
            value = self.parse_expression()
            self.expect(lexical.SEMICOLON, "semicolon")
            return Let(name, type_, value)

        if token is None or token.kind != lexical.NAME:
            raise ExpectedTokenError("statement", _found(token))

        if token.text == PRINT_INT:
            self.advance()
            self.expect(lexical.LEFT_PAREN, "left paren")
            value = self.parse_expression()
            self.expect(lexical.RIGHT_PAREN, "right paren")
            self.expect(lexical.SEMICOLON, "semicolon")
            return Print(value)

        if token.text == RETURN:
            self.advance()
            value = self.parse_expression()
            self.expect(lexical.SEMICOLON, "semicolon")
            return Return(value)

        raise UnknownStatementError(token.text)

    def parse_expression(self):
        token = self.advance()

        if token is not None and token.kind == lexical.INT:
            return Int(to_int(token.text))

        if token is not None and token.kind == lexical.NAME:
            if self.peek_is(lexical.LEFT_PAREN):
                return Call(token.text, self.parse_call_arguments())
            return Name(token.text)

        raise ExpectedTokenError("int or name", _found(token))

    def parse_call_arguments(self):
        self.expect(lexical.LEFT_PAREN, "left paren")

        args = []
        while not self.peek_is(lexical.RIGHT_PAREN):
            args.append(self.parse_expression())
            self._separator()

        self.advance()
        return args

    def _separator(self):
        """After a list element: consumes a comma, or leaves a right paren for the enclosing loop to consume."""
        if self.peek_is(lexical.COMMA):
            self.advance()
        elif not self.peek_is(lexical.RIGHT_PAREN):
            token = self.peek()
            raise ExpectedTokenError("comma or right paren", _found(token))


def parse(tokens):
    """Returns the Module described by tokens. Raises a GenericException on the first grammar violation, or when
    expressions nest deeper than the interpreter stack allows.
    """
    try:
        return Parser(tokens).parse_module()
    except RecursionError:
        raise GenericException("maximum nesting depth exceeded") from None
