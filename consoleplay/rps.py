"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

Reader = Callable[[str], str]
Writer = Callable[[str], None]

ROUNDS_PROMPT = "Enter how many rounds 1 to 10: "
CHOICE_PROMPT = "\n\nEnter your choice: [1]: Rock, [2]: Paper, [3]: Scissors ? "
REPLAY_PROMPT = "Do you want to play again: Y/N ? "


class Choice(IntEnum):
    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Outcome(IntEnum):
    USER_WIN = 1
    DRAW = 2
    COMPUTER_WIN = 3


_BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.SCISSORS: Choice.PAPER,
    Choice.PAPER: Choice.ROCK,
}

_OUTCOME_LINES = {
    Outcome.USER_WIN: "\nUser Wins!\n",
    Outcome.DRAW: "\nDraw!\n",
    Outcome.COMPUTER_WIN: "\nComputer Wins!\a\n",
}


def decide(user: Choice, computer: Choice) -> Outcome:
    """Return the outcome of one round from the user's point of view."""
    if _BEATS[user] is computer:
        return Outcome.USER_WIN
    if _BEATS[computer] is user:
        return Outcome.COMPUTER_WIN
    return Outcome.DRAW


def computer_choice(rng) -> Choice:
    """Pick the computer's move using ``rng.randint``."""
    return Choice(rng.randint(1, 3))


def parse_choice(number: int) -> Choice:
    """Map a menu number to a choice; unknown numbers mean rock."""
    try:
        return Choice(number)
    except ValueError:
        return Choice.ROCK


@dataclass
class Scoreboard:
    """Tally of one game's rounds."""

    user_wins: int = 0
    computer_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome) -> None:
        if outcome is Outcome.USER_WIN:
            self.user_wins += 1
        elif outcome is Outcome.COMPUTER_WIN:
            self.computer_wins += 1
        else:
            self.draws += 1

    def winner(self) -> Outcome:
        """Return who won the game overall."""
        if self.computer_wins > self.user_wins:
            return Outcome.COMPUTER_WIN
        if self.computer_wins < self.user_wins:
            return Outcome.USER_WIN
        return Outcome.DRAW

    def summary(self) -> str:
        """Describe the final result of the game."""
        text = (
            "\n\n_________Final Result_________\n\n"
            f"\nComputer Wins:\t{self.computer_wins}\n"
            f"\nYour Wins    :\t{self.user_wins}\n"
            f"\nDraws        :\t{self.draws}\n"
        )
        winner = self.winner()
        if winner is Outcome.COMPUTER_WIN:
            text += "\n\nWinner is: COMPUTER\n\n"
        elif winner is Outcome.USER_WIN:
            text += "\n\nWinner is: YOU\n\n"
        return text


def _read_non_negative(read: Reader, prompt: str) -> int:
    while True:
        try:
            number = int(read(prompt).strip())
        except ValueError:
            continue
        if number >= 0:
            return number


def _round_report(outcome: Outcome, computer: Choice, user: Choice) -> str:
    return (
        f"\nComputer choice: {computer.label}\n"
        f"\nUser choice: {user.label}\n"
        + _OUTCOME_LINES[outcome]
    )


def play(read: Reader, write: Writer, rng) -> list[Scoreboard]:
    """Play games until the player declines a replay; return each game's tally."""
    boards = []
    while True:
        board = Scoreboard()
        rounds = _read_non_negative(read, ROUNDS_PROMPT)
        for number in range(1, rounds + 1):
            write(f"\n___________________ROUND[{number}]___________________\n\n")
            user = parse_choice(_read_non_negative(read, CHOICE_PROMPT))
            computer = computer_choice(rng)
            outcome = decide(user, computer)
            board.record(outcome)
            write(_round_report(outcome, computer, user))
            write("\n______________________________________________\n\n")
        write(board.summary())
        write("\n________________END GAME________________\n\n")
        boards.append(board)
        if read(REPLAY_PROMPT).strip()[:1] not in ("y", "Y"):
            return boards


def main(argv=None) -> int:
    """Play rock, paper, scissors on the console."""
    try:
        play(input, lambda text: print(text, end="", flush=True), random.Random())
    except (EOFError, KeyboardInterrupt):
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())