"""Classic algorithms and data structures: sorting, searching, number theory, lists, stacks, queues, trees and graphs."""

__version__ = "0.1.0"