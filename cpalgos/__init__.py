"""Classic competitive-programming algorithms and data structures: big numbers,
sorts, heaps, balanced trees, graph algorithms, string matching and DP."""

__version__ = "0.1.0"