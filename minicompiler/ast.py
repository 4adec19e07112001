"""Abstract syntax tree nodes for the minimal language and a tree printer."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, Union

__all__ = [
    "Num",
    "Var",
    "BinOp",
    "Decl",
    "Assign",
    "Print",
    "StmtList",
    "Node",
    "format_ast",
    "print_ast",
]


@dataclass
class Num:
    """Integer literal."""

    value: int


@dataclass
class Var:
    """Reference to a variable."""

    name: str


@dataclass
class BinOp:
    """Binary operation such as ``left + right``."""

    op: str
    left: "Node"
    right: "Node"


@dataclass
class Decl:
    """Declaration of an integer variable."""

    name: str


@dataclass
class Assign:
    """Assignment of an expression to a variable."""

    var: str
    value: "Node"


@dataclass
class Print:
    """Print statement for an expression."""

    expr: "Node"


@dataclass
class StmtList:
    """A statement followed by the rest of the program."""

    stmt: Optional["Node"]
    next: Optional["Node"] = None


Node = Union[Num, Var, BinOp, Decl, Assign, Print, StmtList]


def _lines(node: Optional[Node], level: int) -> Iterator[str]:
    if node is None:
        return
    indent = "  " * level
    match node:
        case Num(value=value):
            yield f"{indent}NUM: {value}"
        case Var(name=name):
            yield f"{indent}VAR: {name}"
        case BinOp(op=op, left=left, right=right):
            yield f"{indent}BINOP: {op}"
            yield from _lines(left, level + 1)
            yield from _lines(right, level + 1)
        case Decl(name=name):
            yield f"{indent}DECL: {name}"
        case Assign(var=var, value=value):
            yield f"{indent}ASSIGN: {var}"
            yield from _lines(value, level + 1)
        case Print(expr=expr):
            yield f"{indent}PRINT"
            yield from _lines(expr, level + 1)
        case StmtList(stmt=stmt, next=rest):
            # Statements in a list share the list's depth.
            yield from _lines(stmt, level)
            yield from _lines(rest, level)
        case _:
            raise TypeError(f"not an AST node: {node!r}")


def format_ast(node: Optional[Node], level: int = 0) -> str:
    """Render the tree as indented text, one node per line."""
    return "".join(line + "\n" for line in _lines(node, level))


def print_ast(node: Optional[Node], level: int = 0) -> None:
    """Write the rendered tree to standard output."""
    print(format_ast(node, level), end="")