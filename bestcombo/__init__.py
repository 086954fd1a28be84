"""Search for low-cost combinations of streaming packages that cover a set of games."""

__version__ = "0.1.0"