"""Solutions to classic algorithm puzzles on numbers, arrays, prefix sums, strings and linked lists."""

__version__ = "0.1.0"
__all__ = ["numbers", "arrays", "prefix_sums", "linked_list", "strings"]