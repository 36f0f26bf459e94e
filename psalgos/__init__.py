"""Solutions to classic algorithm problems: backtracking, DP, data structures, brackets, greedy, two pointers and graphs."""

__version__ = "0.1.0"