"""Binary search, a binary search tree, a sequential symbol table and word counting."""

__version__ = "0.1.0"
__all__ = ["binary_search", "bst", "sequence_st", "words", "word_count"]