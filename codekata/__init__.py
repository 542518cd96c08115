"""Solutions to classic algorithm exercises, grouped by theme into submodules."""

__version__ = "0.1.0"
__all__ = ["arrays", "integers", "linked_list", "optimize", "substrings", "text"]