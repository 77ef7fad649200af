from aoc.day03 import Command, EvalState, Op, commands, part1, part2


EXAMPLE_1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part1_example():
    assert part1(EXAMPLE_1) == 161


def test_part2_example():
    assert part2(EXAMPLE_2) == 48


def test_mul_operands_are_one_to_three_digits():
    assert part1("mul(1234,5)mul(12,3)mul( 1,2)mul(,1)") == 36


def test_commands_skip_junk():
    assert list(commands(EXAMPLE_2)) == [
        Command(Op.MUL, 2, 4),
        Command(Op.DONT),
        Command(Op.MUL, 5, 5),
        Command(Op.MUL, 11, 8),
        Command(Op.DO),
        Command(Op.MUL, 8, 5),
    ]


def test_eval_state_starts_enabled():
    state = EvalState()
    state.eval(Command(Op.MUL, 3, 4))
    state.eval(Command(Op.DONT))
    state.eval(Command(Op.MUL, 100, 100))
    state.eval(Command(Op.DO))
    state.eval(Command(Op.MUL, 1, 2))
    assert state.total == 14
    assert state.apply_mul
