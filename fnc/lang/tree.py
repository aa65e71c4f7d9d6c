"""Abstract syntax tree for the fn language.

Ownership is strict tree containment: a Module owns its Functions, a Function owns its ArgumentDefinitions and body
Statements, and every Statement or Expression owns its sub-Expressions. Nodes compare by value.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from fnc.lang.error import UnknownTypeError

MODULE_NAME = "main"  # modules are not named after anything in the source
INDENT = "    "


class Type(Enum):
    """Closed set of value types."""
    INT = "Int"

    @classmethod
    def from_name(cls, name):
        """Resolves a source type name, raising UnknownTypeError if there is no such type."""
        try:
            return cls(name)
        except ValueError:
            raise UnknownTypeError(name) from None

    def __repr__(self):
        return self.value


class Expression:
    """Superclass of all expression nodes."""


@dataclass
class Int(Expression):
    value: int

    def __repr__(self):
        return f"Int({self.value})"


@dataclass
class Name(Expression):
    name: str

    def __repr__(self):
        return f"Name({self.name!r})"


@dataclass
class Add(Expression):
    """Binary addition. Part of the tree but not produced by the parser."""
    left: Expression
    right: Expression

    def __repr__(self):
        return f"Add({self.left!r}, {self.right!r})"


@dataclass
class Call(Expression):
    name: str
    args: List[Expression] = field(default_factory=list)

    def __repr__(self):
        return f"Call({self.name!r}, {self.args!r})"


class Statement:
    """Superclass of all statement nodes."""


@dataclass
class Let(Statement):
    """Declares and initializes a local variable."""
    name: str
    type: Type
    value: Expression

    def __repr__(self):
        return f"Let(name={self.name!r}, type={self.type!r}, value={self.value!r})"


@dataclass
class Return(Statement):
    value: Expression

    def __repr__(self):
        return f"Return({self.value!r})"


@dataclass
class Print(Statement):
    value: Expression

    def __repr__(self):
        return f"Print({self.value!r})"


@dataclass
class ArgumentDefinition:
    name: str
    type: Type

    def __repr__(self):
        return f"ArgumentDefinition(name={self.name!r}, type={self.type!r})"


@dataclass
class Function:
    name: str
    args: List[ArgumentDefinition] = field(default_factory=list)
    body: List[Statement] = field(default_factory=list)

    def display(self, indents=0):
        """Recursively displays Function with readable format.

        Format:
        Function(name='<name>', args=[<ArgumentDefinition>, ...], body=[
            <Statement>,
            ...
        ])
        """
        result = f"{INDENT * indents}Function(name={self.name!r}, args={self.args!r}, body=["
        if not self.body:
            return result + "])"
        for stmt in self.body:
            result += f"\n{INDENT * (indents + 1)}{stmt!r},"
        return result[:-1] + f"\n{INDENT * indents}])"


@dataclass
class Module:
    """Root of the tree: one per translation unit."""
    name: str = MODULE_NAME
    functions: List[Function] = field(default_factory=list)

    def display(self, indents=0):
        """Recursively displays Module and its Functions, four spaces per level."""
        result = f"{INDENT * indents}Module(name={self.name!r}, functions=["
        if not self.functions:
            return result + "])"
        for function in self.functions:
            result += "\n" + function.display(indents + 1) + ","
        return result[:-1] + f"\n{INDENT * indents}])"

    def __str__(self):
        return self.display()
