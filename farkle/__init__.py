"""
Farkle.

Rule engine for the dice game Farkle: scoring, turn progression and a
parallel turn simulator.
"""

__version__ = "0.1.0"
