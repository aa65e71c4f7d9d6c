"""Lexical analysis for the fn language. Turns raw source text into an ordered sequence of Tokens.

All tokens can be loosely defined as follows:

```
<name>    ::= <letter> (<letter> | <digit> | "_")*   ; "let" and "fn" are keywords, everything else is a Name
<int>     ::= <digit>+                               ; kept as text, converted when parsed (see numerical.py)
<punct>   ::= ":" | "," | "=" | ";" | "(" | ")" | "{" | "}"
```

<letter> and <digit> are ASCII only. Any other character (whitespace included) is dropped without a diagnostic, so
lex never fails: malformed input simply produces a sequence that the parser will reject.
"""

from dataclasses import dataclass
from string import ascii_letters, digits
from typing import Optional

NAME = "Name"
INT = "Int"
COLON = "Colon"
COMMA = "Comma"
EQUAL = "Equal"
SEMICOLON = "SemiColon"
LET = "Let"
FN = "Fn"
LEFT_PAREN = "LeftParen"
RIGHT_PAREN = "RightParen"
LEFT_BRACE = "LeftBrace"
RIGHT_BRACE = "RightBrace"
END_OF_FILE = "EndOfFile"

KEYWORDS = {"let": LET, "fn": FN}
PUNCTUATION = {
    ":": COLON,
    ",": COMMA,
    "=": EQUAL,
    ";": SEMICOLON,
    "(": LEFT_PAREN,
    ")": RIGHT_PAREN,
    "{": LEFT_BRACE,
    "}": RIGHT_BRACE,
}

NAME_START = frozenset(ascii_letters)
NAME_CHARS = frozenset(ascii_letters + digits + "_")
DIGITS = frozenset(digits)


@dataclass(frozen=True)
class Token:
    """One lexical unit. text is only set for Name and Int tokens."""
    kind: str
    text: Optional[str] = None

    def describe(self):
        """Short human-readable form used in error messages."""
        return self.text if self.text is not None else self.kind

    def __repr__(self):
        if self.text is None:
            return self.kind
        return f"{self.kind}({self.text!r})"


def _scan(source, start, chars):
    """Returns the index just past the maximal run of chars beginning at start."""
    end = start
    while end < len(source) and source[end] in chars:
        end += 1
    return end


def lex(source):
    """Returns the list of Tokens in source, always terminated by exactly one EndOfFile token."""
    tokens = []
    pos = 0

    while pos < len(source):
        char = source[pos]

        if char in NAME_START:
            end = _scan(source, pos + 1, NAME_CHARS)
            name = source[pos:end]
            tokens.append(Token(KEYWORDS[name]) if name in KEYWORDS else Token(NAME, name))
            pos = end

        elif char in DIGITS:
            end = _scan(source, pos + 1, DIGITS)
            tokens.append(Token(INT, source[pos:end]))
            pos = end

        else:
            if char in PUNCTUATION:
                tokens.append(Token(PUNCTUATION[char]))
            pos += 1  # anything unrecognized is discarded

    tokens.append(Token(END_OF_FILE))
    return tokens
