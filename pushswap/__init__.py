"""Two-stack sorting puzzle solver, with its parsing, sorting and small text helpers."""

__version__ = "1.0.0"