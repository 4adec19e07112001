"""Symbol table mapping variable names to stack offsets."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional, TextIO, Union

__all__ = [
    "MAX_VARS",
    "WORD_SIZE",
    "SymbolError",
    "DuplicateVariableError",
    "UndeclaredVariableError",
    "SymbolTableFullError",
    "Symbol",
    "SymbolTable",
]

MAX_VARS = 100
WORD_SIZE = 4


class SymbolError(Exception):
    """Base class for symbol table errors."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class DuplicateVariableError(SymbolError):
    """A variable was declared twice."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Variable {name} already declared")


class UndeclaredVariableError(SymbolError):
    """A variable was used without being declared."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Variable {name} not declared")


class SymbolTableFullError(SymbolError):
    """The table already holds the maximum number of variables."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Cannot declare {name}: more than {MAX_VARS} variables")


@dataclass(frozen=True)
class Symbol:
    """A declared variable and its stack offset in bytes."""

    name: str
    offset: int


class SymbolTable:
    """Declared variables in declaration order, each with a stack slot.

    ``trace`` may be ``None`` (silent), ``True`` (standard output) or a
    text stream that receives a log of every operation.
    """

    def __init__(self, trace: Union[None, bool, TextIO] = None) -> None:
        if trace is True:
            trace = sys.stdout
        self._trace: Optional[TextIO] = trace or None
        self._symbols: dict[str, Symbol] = {}
        self.next_offset = 0
        self._log("SYMBOL TABLE: Initialized\n")
        self._log(self.dump())

    def _log(self, text: str) -> None:
        if self._trace is not None:
            self._trace.write(text)

    def _lookup(self, name: str) -> Optional[Symbol]:
        symbol = self._symbols.get(name)
        if symbol is None:
            self._log(f"SYMBOL TABLE: Variable '{name}' not found\n")
        else:
            self._log(
                f"SYMBOL TABLE: Found variable '{name}' at offset {symbol.offset}\n"
            )
        return symbol

    def add(self, name: str) -> int:
        """Declare ``name`` and return its offset."""
        if self.is_declared(name):
            self._log(f"SYMBOL TABLE: Failed to add '{name}' - already declared\n")
            raise DuplicateVariableError(name)
        if len(self._symbols) >= MAX_VARS:
            raise SymbolTableFullError(name)
        symbol = Symbol(name, self.next_offset)
        self._symbols[name] = symbol
        self.next_offset += WORD_SIZE
        self._log(
            f"SYMBOL TABLE: Added variable '{name}' at offset {symbol.offset}\n"
        )
        self._log(self.dump())
        return symbol.offset

    def offset(self, name: str) -> int:
        """Return the stack offset of ``name``."""
        symbol = self._lookup(name)
        if symbol is None:
            raise UndeclaredVariableError(name)
        return symbol.offset

    def is_declared(self, name: str) -> bool:
        """Whether ``name`` has been declared."""
        return self._lookup(name) is not None

    def dump(self) -> str:
        """Describe the current contents of the table."""
        parts = [
            "\n=== SYMBOL TABLE STATE ===\n",
            f"Count: {len(self._symbols)}, Next Offset: {self.next_offset}\n",
        ]
        if not self._symbols:
            parts.append("(empty)\n")
        else:
            parts.append("Variables:\n")
            parts.extend(
                f"  [{index}] {symbol.name} -> offset {symbol.offset}\n"
                for index, symbol in enumerate(self._symbols.values())
            )
        parts.append("==========================\n\n")
        return "".join(parts)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._symbols.values()))