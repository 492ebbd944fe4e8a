"""Micromouse maze solvers, greedy and depth-first, driven through a simulator's text protocol."""

__version__ = "1.0.0"
__all__ = ["api", "greedy", "robot", "maze", "vehicles", "dfs"]