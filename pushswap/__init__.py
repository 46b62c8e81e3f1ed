"""Two-stack integer sorting with a restricted operation set, and a checker."""

__version__ = "1.0.0"
__all__ = ["checker", "errors", "parsing", "push_to_a", "push_to_b", "sorter", "stacks", "stats"]