"""Three-address code: generation from the AST, optimisation and listing."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from minicompiler.ast import Assign, BinOp, Decl, Node, Num, Print, StmtList, Var

__all__ = [
    "TACOp",
    "TACInstr",
    "TACGenerator",
    "generate_tac",
    "optimize_tac",
    "format_tac",
    "format_optimized_tac",
]

_RULE = "─────────────────────────────\n"
_LEADING_DIGITS = re.compile(r"\d+")


class TACOp(Enum):
    """Kinds of three-address instructions."""

    ADD = "add"
    ASSIGN = "assign"
    PRINT = "print"
    DECL = "decl"


@dataclass(frozen=True)
class TACInstr:
    """One instruction: ``result = arg1 op arg2`` or a subset of it."""

    op: TACOp
    arg1: Optional[str] = None
    arg2: Optional[str] = None
    result: Optional[str] = None


class TACGenerator:
    """Walks an AST and collects three-address instructions."""

    def __init__(self) -> None:
        self.instructions: list[TACInstr] = []
        self.temp_count = 0

    def new_temp(self) -> str:
        """Return a fresh temporary name (t0, t1, ...)."""
        name = f"t{self.temp_count}"
        self.temp_count += 1
        return name

    def generate_expr(self, node: Optional[Node]) -> Optional[str]:
        """Emit code for an expression and return the operand holding its value."""
        match node:
            case Num(value=value):
                return str(value)
            case Var(name=name):
                return name
            case BinOp(op=op, left=left, right=right):
                left_operand = self.generate_expr(left)
                right_operand = self.generate_expr(right)
                temp = self.new_temp()
                if op == "+":
                    self.instructions.append(
                        TACInstr(TACOp.ADD, left_operand, right_operand, temp)
                    )
                return temp
            case _:
                return None

    def generate(self, node: Optional[Node]) -> None:
        """Emit code for a statement or statement list."""
        match node:
            case Decl(name=name):
                self.instructions.append(TACInstr(TACOp.DECL, result=name))
            case Assign(var=var, value=value):
                operand = self.generate_expr(value)
                self.instructions.append(TACInstr(TACOp.ASSIGN, operand, result=var))
            case Print(expr=expr):
                operand = self.generate_expr(expr)
                self.instructions.append(TACInstr(TACOp.PRINT, operand))
            case StmtList(stmt=stmt, next=rest):
                self.generate(stmt)
                self.generate(rest)
            case _:
                pass


def generate_tac(node: Optional[Node]) -> list[TACInstr]:
    """Translate a program tree into a list of instructions."""
    generator = TACGenerator()
    generator.generate(node)
    return list(generator.instructions)


def _is_constant(operand: Optional[str]) -> bool:
    return bool(operand) and operand[0] in "0123456789"


def _to_int(operand: str) -> int:
    match = _LEADING_DIGITS.match(operand)
    return int(match.group()) if match else 0


def optimize_tac(instructions: Iterable[TACInstr]) -> list[TACInstr]:
    """Apply constant folding and copy propagation, returning a new list."""
    known: dict[str, Optional[str]] = {}

    def resolve(operand: Optional[str]) -> Optional[str]:
        if operand is not None and operand in known:
            return known[operand]
        return operand

    optimized: list[TACInstr] = []
    for instr in instructions:
        match instr.op:
            case TACOp.DECL:
                optimized.append(TACInstr(TACOp.DECL, result=instr.result))
            case TACOp.ADD:
                left = resolve(instr.arg1)
                right = resolve(instr.arg2)
                if _is_constant(left) and _is_constant(right):
                    folded = str(_to_int(left) + _to_int(right))
                    known[instr.result] = folded
                    optimized.append(TACInstr(TACOp.ASSIGN, folded, result=instr.result))
                else:
                    optimized.append(TACInstr(TACOp.ADD, left, right, instr.result))
            case TACOp.ASSIGN:
                value = resolve(instr.arg1)
                known[instr.result] = value
                optimized.append(TACInstr(TACOp.ASSIGN, value, result=instr.result))
            case TACOp.PRINT:
                optimized.append(TACInstr(TACOp.PRINT, resolve(instr.arg1)))
    return optimized


def format_tac(instructions: Iterable[TACInstr]) -> str:
    """Render an unoptimised instruction listing with explanatory comments."""
    parts = ["Unoptimized TAC Instructions:\n", _RULE]
    for number, instr in enumerate(instructions, start=1):
        prefix = f"{number:2d}: "
        match instr.op:
            case TACOp.DECL:
                parts.append(
                    f"{prefix}DECL {instr.result}"
                    f"          // Declare variable '{instr.result}'\n"
                )
            case TACOp.ADD:
                parts.append(
                    f"{prefix}{instr.result} = {instr.arg1} + {instr.arg2}"
                    f"     // Add: store result in {instr.result}\n"
                )
            case TACOp.ASSIGN:
                parts.append(
                    f"{prefix}{instr.result} = {instr.arg1}"
                    f"           // Assign value to {instr.result}\n"
                )
            case TACOp.PRINT:
                parts.append(
                    f"{prefix}PRINT {instr.arg1}"
                    f"          // Output value of {instr.arg1}\n"
                )
    return "".join(parts)


def format_optimized_tac(instructions: Iterable[TACInstr]) -> str:
    """Render an optimised instruction listing with explanatory comments."""
    parts = ["Optimized TAC Instructions:\n", _RULE]
    for number, instr in enumerate(instructions, start=1):
        prefix = f"{number:2d}: "
        match instr.op:
            case TACOp.DECL:
                parts.append(f"{prefix}DECL {instr.result}\n")
            case TACOp.ADD:
                parts.append(
                    f"{prefix}{instr.result} = {instr.arg1} + {instr.arg2}"
                    "     // Runtime addition needed\n"
                )
            case TACOp.ASSIGN:
                note = (
                    f"// Constant value: {instr.arg1}"
                    if _is_constant(instr.arg1)
                    else "// Copy value"
                )
                parts.append(f"{prefix}{instr.result} = {instr.arg1}           {note}\n")
            case TACOp.PRINT:
                note = (
                    f"// Print constant: {instr.arg1}"
                    if _is_constant(instr.arg1)
                    else "// Print variable"
                )
                parts.append(f"{prefix}PRINT {instr.arg1}          {note}\n")
    return "".join(parts)