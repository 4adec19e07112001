# minicompiler

A compact compiler back end for a tiny C-like teaching language. The language
has integer variables, addition, assignment and printing. The package takes a
program from its syntax tree to MIPS assembly and lets you look at each stage
on the way:

1. **Abstract syntax tree**: `minicompiler.ast`
2. **Symbol table** with stack offsets: `minicompiler.symtab`
3. **Three-address code** and a simple optimiser that does constant folding
   and copy propagation: `minicompiler.tac`
4. **MIPS code generation** for simulators such as SPIM or MARS:
   `minicompiler.codegen`

The package has no runtime dependencies and needs Python 3.10 or later.

## Building a program

You build programs directly from the AST node dataclasses `Num`, `Var`,
`BinOp`, `Decl`, `Assign`, `Print` and `StmtList`. A program is a chain of
`StmtList` nodes. Each one holds a statement and the rest of the list
(`None` at the end).

```python
from minicompiler.ast import Num, Var, BinOp, Decl, Assign, Print, StmtList, format_ast

# int x; x = 2 + 3; print(x);
program = StmtList(
    Decl("x"),
    StmtList(
        Assign("x", BinOp("+", Num(2), Num(3))),
        StmtList(Print(Var("x")), None),
    ),
)

print(format_ast(program, 0), end="")
```

This prints:

```
DECL: x
ASSIGN: x
  BINOP: +
    NUM: 2
    NUM: 3
PRINT
  VAR: x
```

`format_ast` returns the tree as indented text, one node per line, two
spaces per level. Statements in a `StmtList` share the list's depth.
`print_ast(node, level)` writes the same text to standard output.

## Three-address code

```python
from minicompiler.tac import generate_tac, optimize_tac, format_tac, format_optimized_tac

code = generate_tac(program)
print(format_tac(code))

optimized = optimize_tac(code)
print(format_optimized_tac(optimized))
```

`generate_tac` returns a list of `TACInstr` values. Each has an `op` (a
`TACOp`: `ADD`, `ASSIGN`, `PRINT` or `DECL`) and the optional operands
`arg1`, `arg2` and `result`. Only the `+` operator produces an instruction.

`optimize_tac` returns a new list. It folds additions whose operands are
known constants into assignments, and replaces operands with the values most
recently assigned to them. In the example above, `print(x)` becomes
`PRINT 5`.

For finer control, `TACGenerator` has `generate`, `generate_expr` and
`new_temp`, and collects its output in `instructions`. Temporaries are named
`t0`, `t1`, ….

## MIPS assembly

```python
from minicompiler.symtab import SymbolTable
from minicompiler.codegen import MipsGenerator, emit_mips, generate_mips

assembly = emit_mips(program, SymbolTable(trace=False))
print(assembly)

generate_mips(program, "program.s", SymbolTable(trace=False))
```

`emit_mips` returns the assembly as a string and `generate_mips` writes it
to a file. Both create a fresh, silent `SymbolTable` when none is given.
`MipsGenerator(symtab).generate(root)` does the same work as `emit_mips`.

Code generation follows these rules:

- Each declared variable gets a 4-byte slot on the stack.
- A frame of 400 bytes is reserved.
- Expressions are evaluated in the registers `$t0` to `$t7`, used in
  rotation.
- Printing uses the simulator's syscalls 1 (print integer) and 11 (print
  character, for the newline). The program ends with syscall 10.

Using a variable that has not been declared raises
`UndeclaredVariableError`. Declaring one twice raises
`DuplicateVariableError`.

## Symbol table

`SymbolTable` maps names to stack offsets, counting up from 0 in steps of 4:

- `add(name)` declares a name and returns its offset.
- `offset(name)` returns the offset of a declared name.
- `is_declared(name)` tests for a name.
- `dump()` returns the current state as text.
- `len()` and iteration give the declared `Symbol` entries (`name`,
  `offset`) in declaration order.

The `trace` argument sets where a log of every operation goes. `None` or
`False` keeps the table silent. `True` writes to standard output. A text
stream receives the log directly.

Errors are raised as exceptions, all derived from `SymbolError`, which keeps
the offending name in its `name` attribute:

- `DuplicateVariableError`: a name is declared twice.
- `UndeclaredVariableError`: a name is looked up without a declaration.
- `SymbolTableFullError`: more than 100 variables are declared.

## What the package does not do

- It has no parser. Programs cannot be read from source text, so you build
  them from AST nodes as shown above.
- It has no command-line program. Every stage is called from Python.
- It does not run the generated assembly. Use a MIPS simulator for that.

## Running the tests

Install the `test` extra, which provides pytest, then run `pytest` from the
project root.