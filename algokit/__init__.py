"""Classic algorithms and data structures: sorting, searching, graphs, trees,
heaps, queues, stacks, range queries and number theory."""

__version__ = "0.1.0"