"""Two-stack sorting with a restricted operation set, and a solution checker."""

__version__ = "1.0.0"
__all__ = ["stacks", "validate", "sorting", "cli", "checker"]