"""MIPS assembly generation from the AST."""

from __future__ import annotations

import os
from typing import Optional, Union

from minicompiler.ast import Assign, BinOp, Decl, Node, Num, Print, StmtList, Var
from minicompiler.symtab import SymbolTable

__all__ = ["MipsGenerator", "emit_mips", "generate_mips"]

_LAST_TEMP = 7
_STACK_BYTES = 400


class MipsGenerator:
    """Generates MIPS assembly for one program.

    Variables live on the stack at offsets given by ``symtab``; expression
    values use the registers $t0-$t7 in rotation.
    """

    def __init__(self, symtab: Optional[SymbolTable] = None) -> None:
        self.symtab = symtab if symtab is not None else SymbolTable()
        self._temp = 0
        self._out: list[str] = []

    def _emit(self, text: str) -> None:
        self._out.append(text)

    def _next_temp(self) -> int:
        reg = self._temp
        self._temp += 1
        if self._temp > _LAST_TEMP:
            self._temp = 0
        return reg

    def _expr(self, node: Optional[Node]) -> None:
        match node:
            case Num(value=value):
                self._emit(f"    li $t{self._next_temp()}, {value}\n")
            case Var(name=name):
                offset = self.symtab.offset(name)
                self._emit(f"    lw $t{self._next_temp()}, {offset}($sp)\n")
            case BinOp(left=left, right=right):
                self._expr(left)
                left_reg = self._temp - 1
                self._expr(right)
                right_reg = self._temp - 1
                self._emit(f"    add $t{left_reg}, $t{left_reg}, $t{right_reg}\n")
                self._temp = left_reg + 1
            case _:
                pass

    def _stmt(self, node: Optional[Node]) -> None:
        match node:
            case Decl(name=name):
                offset = self.symtab.add(name)
                self._emit(f"    # Declared {name} at offset {offset}\n")
            case Assign(var=var, value=value):
                offset = self.symtab.offset(var)
                self._expr(value)
                self._emit(f"    sw $t{self._temp - 1}, {offset}($sp)\n")
                self._temp = 0
            case Print(expr=expr):
                self._expr(expr)
                self._emit("    # Print integer\n")
                self._emit(f"    move $a0, $t{self._temp - 1}\n")
                self._emit("    li $v0, 1\n")
                self._emit("    syscall\n")
                self._emit("    # Print newline\n")
                self._emit("    li $v0, 11\n")
                self._emit("    li $a0, 10\n")
                self._emit("    syscall\n")
                self._temp = 0
            case StmtList(stmt=stmt, next=rest):
                self._stmt(stmt)
                self._stmt(rest)
            case _:
                pass

    def generate(self, root: Optional[Node]) -> str:
        """Return the complete assembly program for ``root``."""
        self._out = []
        self._temp = 0
        self._emit(".data\n")
        self._emit("\n.text\n")
        self._emit(".globl main\n")
        self._emit("main:\n")
        self._emit("    # Allocate stack space\n")
        self._emit(f"    addi $sp, $sp, -{_STACK_BYTES}\n\n")
        self._stmt(root)
        self._emit("\n    # Exit program\n")
        self._emit(f"    addi $sp, $sp, {_STACK_BYTES}\n")
        self._emit("    li $v0, 10\n")
        self._emit("    syscall\n")
        return "".join(self._out)


def emit_mips(root: Optional[Node], symtab: Optional[SymbolTable] = None) -> str:
    """Return MIPS assembly for ``root`` using a fresh or given symbol table."""
    return MipsGenerator(symtab).generate(root)


def generate_mips(
    root: Optional[Node],
    filename: Union[str, "os.PathLike[str]"],
    symtab: Optional[SymbolTable] = None,
) -> None:
    """Write MIPS assembly for ``root`` to ``filename``."""
    assembly = emit_mips(root, symtab)
    with open(filename, "w", encoding="utf-8") as output:
        output.write(assembly)