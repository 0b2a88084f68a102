"""Classic algorithms and data structures: sorts, selection, geometry, stacks, queues, a priority queue, union-find and percolation."""

__version__ = "0.1.0"