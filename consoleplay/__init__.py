"""Console games, a math quiz, an ATM simulator, a stack and a vector."""

__version__ = "0.1.0"

__all__ = ["atm", "mathgame", "rps", "stack", "vector"]