"""Algorithms and small data structures: linked lists, stacks and queues,
bracket and string routines, sliding windows, binary search, bit tricks,
array problems and greedy methods."""

__version__ = "0.1.0"