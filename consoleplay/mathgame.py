"""An arithmetic quiz played on the console."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

Reader = Callable[[str], str]
Writer = Callable[[str], None]

COUNT_PROMPT = "Enter Number of questions: "
OPERATION_PROMPT = (
    "Enter questions operator: [1] Add, [2] Sub, [3] Mul, [4] Div, [5] Mix ? "
)
LEVEL_PROMPT = "Enter questions level: [1] Easy, [2] Med, [3] Hard, [4] Mix ? "
REPLAY_PROMPT = "Do you want to replay game: Y/N ? "
_RULE = "_________________________"


class Level(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3
    MIX = 4

    @property
    def label(self) -> str:
        return _LEVEL_LABELS[self]


class Operation(IntEnum):
    ADD = 1
    SUB = 2
    MUL = 3
    DIV = 4
    MIX = 5

    @property
    def label(self) -> str:
        return _OPERATION_LABELS[self]

    @property
    def symbol(self) -> str:
        if self is Operation.MIX:
            raise ValueError("a mixed operation has no single symbol")
        return _OPERATION_SYMBOLS[self]


_LEVEL_LABELS = {
    Level.EASY: "Easy",
    Level.MEDIUM: "Medium",
    Level.HARD: "Hard",
    Level.MIX: "Mix",
}
_OPERATION_LABELS = {
    Operation.ADD: "Add",
    Operation.SUB: "Sub",
    Operation.MUL: "Mul",
    Operation.DIV: "Div",
    Operation.MIX: "Mix",
}
_OPERATION_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUB: "-",
    Operation.MUL: "*",
    Operation.DIV: "/",
}
_RANGES = {
    Level.EASY: (1, 10),
    Level.MEDIUM: (10, 50),
    Level.HARD: (50, 100),
}


def operand_range(level: Level) -> tuple[int, int]:
    """Return the inclusive range operands are drawn from at ``level``."""
    if level is Level.MIX:
        raise ValueError("a mixed level has no single operand range")
    return _RANGES[level]


def resolve_level(level: Level, rng) -> Level:
    """Replace a mixed level with a randomly chosen concrete one."""
    if level is Level.MIX:
        return Level(rng.randint(1, 3))
    return level


def resolve_operation(operation: Operation, rng) -> Operation:
    """Replace a mixed operation with a randomly chosen concrete one."""
    if operation is Operation.MIX:
        return Operation(rng.randint(1, 4))
    return operation


def calculate(left: int, right: int, operation: Operation) -> int:
    """Apply ``operation``; division is integer division truncated toward zero."""
    if operation is Operation.ADD:
        return left + right
    if operation is Operation.SUB:
        return left - right
    if operation is Operation.MUL:
        return left * right
    if operation is Operation.DIV:
        if right == 0:
            raise ZeroDivisionError("division by zero")
        quotient = abs(left) // abs(right)
        return quotient if (left < 0) == (right < 0) else -quotient
    raise ValueError("cannot calculate with a mixed operation")


@dataclass(frozen=True)
class Question:
    left: int
    right: int
    operation: Operation

    def answer(self) -> int:
        return calculate(self.left, self.right, self.operation)

    def render(self) -> str:
        return f"{self.left}\n{self.right}{self.operation.symbol}\n_______\n"


def make_question(level: Level, operation: Operation, rng) -> Question:
    """Draw a question for the given level and operation."""
    low, high = operand_range(resolve_level(level, rng))
    left = rng.randint(low, high)
    right = rng.randint(low, high)
    return Question(left, right, resolve_operation(operation, rng))


@dataclass(frozen=True)
class QuizResult:
    question_count: int
    level: Level
    operation: Operation
    right_answers: int
    wrong_answers: int

    def passed(self) -> bool:
        """A quiz passes when right answers outnumber wrong ones."""
        return self.right_answers > self.wrong_answers

    def render(self) -> str:
        verdict = "Pass :-)" if self.passed() else "Fail :-("
        return (
            f"\n\n{_RULE}\n\n Final Result is {verdict}\n{_RULE}\n"
            f"Number of Questions: {self.question_count}\n"
            f"Question level     : {self.level.label}\n"
            f"Operator Type      : {self.operation.label}\n"
            f"Number of Right Answers: {self.right_answers}\n"
            f"Number of Wrong Answers: {self.wrong_answers}\n"
            f"\n{_RULE}\n"
        )


def _read_int(read: Reader, prompt: str, accept: Callable[[int], bool]) -> int:
    while True:
        try:
            number = int(read(prompt).strip())
        except ValueError:
            continue
        if accept(number):
            return number


def _parse_reply(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def play(read: Reader, write: Writer, rng) -> list[QuizResult]:
    """Run quizzes until the player declines a replay; return each result."""
    results = []
    while True:
        count = _read_int(read, COUNT_PROMPT, lambda n: n > 0)
        operation = Operation(_read_int(read, OPERATION_PROMPT, lambda n: 1 <= n <= 5))
        level = Level(_read_int(read, LEVEL_PROMPT, lambda n: 1 <= n <= 4))
        right = wrong = 0
        for number in range(1, count + 1):
            write(f"\n\nQuestion [{number} / {count}]\n\n")
            question = make_question(level, operation, rng)
            write(question.render())
            expected = question.answer()
            if _parse_reply(read("")) == expected:
                right += 1
                write("\nRight answer :-)\n")
            else:
                wrong += 1
                write("\nWrong answer :-(\n")
                write(f"The right answer is: {expected}\n")
        result = QuizResult(count, level, operation, right, wrong)
        write(result.render())
        results.append(result)
        if read(REPLAY_PROMPT).strip()[:1] not in ("y", "Y"):
            return results


def main(argv=None) -> int:
    """Play the arithmetic quiz on the console."""
    try:
        play(input, lambda text: print(text, end="", flush=True), random.Random())
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())