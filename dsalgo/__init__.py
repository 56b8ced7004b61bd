"""Classic data structures and algorithms: searching, sorting, sequences, hash tables, stacks, queues and graphs."""

__version__ = "0.1.0"