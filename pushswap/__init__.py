"""Two-stack sorting puzzle: stack operations, argument parsing, fixed sorts for small stacks and a command."""

__version__ = "0.1.0"
__all__ = ["stack", "parsing", "sorting", "cli"]