"""
Klondike - Solitaire Rules Engine

A single-player Klondike engine that tracks the 52-card deck across
stock, waste, tableau and foundations, and validates/applies moves.
The engine provides:
- Deck construction and dealing
- Rule predicates for legal moves
- In-place state mutators with boolean success
- Legal move probing for presentation layers
"""

__version__ = "0.1.0"
