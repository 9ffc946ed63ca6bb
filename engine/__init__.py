"""
Simulation engine — batch and streaming rolls over timelines.
"""

from .runner import iter_rolls, simulate_timeline

__all__ = ["iter_rolls", "simulate_timeline"]
