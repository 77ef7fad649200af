"""
Day 3: Mull It Over

Corrupted memory holds mul(a,b) instructions among junk. Part 2 adds do()
and don't() switches, evaluated as a command stream by a tiny machine:

  - Command: one recognised instruction (junk is skipped by the tokenizer)
  - EvalState: running total plus the enabled flag
  - EvalState.eval: apply one command
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple


MUL_RE = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
COMMAND_RE = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|do\(\)|don't\(\)")


class Op(Enum):
    DO = "do"
    DONT = "don't"
    MUL = "mul"


class Command(NamedTuple):
    op: Op
    a: int = 0
    b: int = 0


@dataclass
class EvalState:
    total: int = 0
    apply_mul: bool = True

    def eval(self, command: Command) -> None:
        if command.op is Op.DO:
            self.apply_mul = True
        elif command.op is Op.DONT:
            self.apply_mul = False
        elif self.apply_mul:
            self.total += command.a * command.b


def commands(text: str) -> Iterator[Command]:
    """Yield recognised instructions in order of appearance."""
    for m in COMMAND_RE.finditer(text):
        token = m.group(0)
        if token == "do()":
            yield Command(Op.DO)
        elif token == "don't()":
            yield Command(Op.DONT)
        else:
            yield Command(Op.MUL, int(m.group(1)), int(m.group(2)))


def part1(text: str) -> int:
    return sum(int(a) * int(b) for a, b in MUL_RE.findall(text))


def part2(text: str) -> int:
    state = EvalState()
    for command in commands(text):
        state.eval(command)
    return state.total
