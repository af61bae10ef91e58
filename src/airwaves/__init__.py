"""Airwaves: an in-world radio receiver simulation.

A listener tunes a dial, the engine resolves the nearest station, simulates
reception quality and drives each station's weekly programming.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
