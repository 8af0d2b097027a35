"""
teafortwo - 2048 engine with automatic players

A deterministic, seed-reproducible implementation of the 2048 sliding
puzzle. The package provides:
- The grid engine (shift, merge, random placement, terminal detection)
- Sessions owning their own random stream
- Strategies that play a session to the end (Hungry, Naive)
- A terminal front end for interactive and batch play
"""

__version__ = "0.1.0"
