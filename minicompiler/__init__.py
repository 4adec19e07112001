"""Teaching compiler back end: AST, symbol table, three-address code and MIPS output."""

__version__ = "0.1.0"

__all__ = ["ast", "symtab", "tac", "codegen"]