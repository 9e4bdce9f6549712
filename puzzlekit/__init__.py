"""Solutions to classic introductory puzzles: sequences, arithmetic, strings, and a command line."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "cli", "sequences", "strings"]