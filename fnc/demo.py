"""Lexes and parses a fixed sample program, printing the source, the token sequence and the resulting Module."""

from fnc.lang.lexical import lex
from fnc.lang.syntactic import parse

SAMPLE = """
fn main() {
    let x: Int = 5;
    let y: Int = 10;
    let z: Int = add(x, y);
    print_int(z);
}"""


def main():
    print(SAMPLE)

    tokens = lex(SAMPLE)
    print(tokens)

    module = parse(tokens)
    print(module.display())


if __name__ == "__main__":
    main()
