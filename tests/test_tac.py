from minicompiler.ast import Assign, BinOp, Decl, Num, Print, StmtList, Var
from minicompiler.tac import (
    TACGenerator,
    TACInstr,
    TACOp,
    format_optimized_tac,
    format_tac,
    generate_tac,
    optimize_tac,
)


def _program(*stmts):
    node = None
    for stmt in reversed(stmts):
        node = StmtList(stmt, node)
    return node


def test_new_temp_counts_up():
    gen = TACGenerator()
    assert [gen.new_temp() for _ in range(3)] == ["t0", "t1", "t2"]


def test_decl():
    assert generate_tac(Decl("x")) == [TACInstr(TACOp.DECL, None, None, "x")]


def test_empty_program():
    assert generate_tac(None) == []


def test_assign_of_addition():
    instrs = generate_tac(Assign("x", BinOp("+", Num(1), Var("y"))))
    assert len(instrs) == 2
    add = instrs[0]
    assert add.op is TACOp.ADD
    assert (add.arg1, add.arg2) == ("1", "y")
    assert instrs[1] == TACInstr(TACOp.ASSIGN, add.result, None, "x")


def test_nested_additions_chain_temps():
    tree = BinOp("+", BinOp("+", Num(1), Num(2)), Num(3))
    instrs = generate_tac(Print(tree))
    first, second, printed = instrs
    assert second.arg1 == first.result
    assert first.result != second.result
    assert printed == TACInstr(TACOp.PRINT, second.result)


def test_unknown_operator_emits_no_instruction():
    instrs = generate_tac(Assign("x", BinOp("-", Num(1), Num(2))))
    assert len(instrs) == 1
    assert instrs[0].op is TACOp.ASSIGN
    assert instrs[0].arg1.startswith("t")


def test_print_variable():
    assert generate_tac(Print(Var("x"))) == [TACInstr(TACOp.PRINT, "x")]


def test_statement_order_is_kept():
    prog = _program(Decl("a"), Decl("b"), Print(Var("b")))
    instrs = generate_tac(prog)
    assert [i.op for i in instrs] == [TACOp.DECL, TACOp.DECL, TACOp.PRINT]
    assert [instrs[0].result, instrs[1].result] == ["a", "b"]


def test_generate_expr_of_statement_is_none():
    gen = TACGenerator()
    assert gen.generate_expr(Decl("x")) is None
    assert gen.instructions == []


def test_constant_folding_propagates():
    prog = _program(
        Decl("x"), Assign("x", BinOp("+", Num(0), Num(7))), Print(Var("x"))
    )
    raw = generate_tac(prog)
    temp = raw[1].result
    assert optimize_tac(raw) == [
        TACInstr(TACOp.DECL, result="x"),
        TACInstr(TACOp.ASSIGN, "7", result=temp),
        TACInstr(TACOp.ASSIGN, "7", result="x"),
        TACInstr(TACOp.PRINT, "7"),
    ]


def test_chained_folding():
    tree = BinOp("+", BinOp("+", Num(0), Num(7)), Num(0))
    optimized = optimize_tac(generate_tac(Print(tree)))
    assert all(i.op is not TACOp.ADD for i in optimized)
    assert optimized[-1] == TACInstr(TACOp.PRINT, "7")


def test_addition_with_unknown_variable_is_kept():
    prog = _program(Decl("y"), Decl("x"), Assign("x", BinOp("+", Var("y"), Num(1))))
    optimized = optimize_tac(generate_tac(prog))
    adds = [i for i in optimized if i.op is TACOp.ADD]
    assert len(adds) == 1
    assert (adds[0].arg1, adds[0].arg2) == ("y", "1")


def test_copy_propagation():
    prog = _program(
        Decl("a"),
        Decl("b"),
        Assign("a", Num(5)),
        Assign("b", Var("a")),
        Print(Var("b")),
    )
    optimized = optimize_tac(generate_tac(prog))
    assert optimized[3] == TACInstr(TACOp.ASSIGN, "5", result="b")
    assert optimized[4] == TACInstr(TACOp.PRINT, "5")


def test_latest_assignment_wins():
    prog = _program(
        Decl("a"), Assign("a", Num(1)), Assign("a", Num(2)), Print(Var("a"))
    )
    assert optimize_tac(generate_tac(prog))[-1] == TACInstr(TACOp.PRINT, "2")


def test_optimize_leaves_input_untouched():
    prog = _program(Decl("x"), Assign("x", BinOp("+", Num(0), Num(7))))
    raw = generate_tac(prog)
    snapshot = list(raw)
    optimize_tac(raw)
    assert raw == snapshot


def test_format_tac_listing():
    text = format_tac([TACInstr(TACOp.DECL, result="x"), TACInstr(TACOp.PRINT, "x")])
    lines = text.splitlines()
    assert lines[0] == "Unoptimized TAC Instructions:"
    assert lines[2] == " 1: DECL x          // Declare variable 'x'"
    assert lines[3] == " 2: PRINT x          // Output value of x"


def test_format_tac_empty_is_header_only():
    assert len(format_tac([]).splitlines()) == 2


def test_format_tac_line_numbers_widen():
    instrs = [TACInstr(TACOp.DECL, result=f"v{n}") for n in range(10)]
    lines = format_tac(instrs).splitlines()
    assert lines[-1].startswith("10: DECL v9")
    assert lines[2].startswith(" 1: DECL v0")


def test_format_optimized_comments():
    instrs = [
        TACInstr(TACOp.DECL, result="x"),
        TACInstr(TACOp.ASSIGN, "7", result="x"),
        TACInstr(TACOp.ASSIGN, "y", result="x"),
        TACInstr(TACOp.ADD, "x", "y", "t9"),
        TACInstr(TACOp.PRINT, "7"),
        TACInstr(TACOp.PRINT, "x"),
    ]
    lines = format_optimized_tac(instrs).splitlines()
    assert lines[0] == "Optimized TAC Instructions:"
    assert lines[2] == " 1: DECL x"
    assert lines[3].endswith("// Constant value: 7")
    assert lines[4].endswith("// Copy value")
    assert lines[5].endswith("// Runtime addition needed")
    assert lines[6].endswith("// Print constant: 7")
    assert lines[7].endswith("// Print variable")