"""
Heroine State - State pattern demonstration

A heroine alternates between walking and jumping behaviors. Once per tick
the current state prints its name and decides, from the wall clock, whether
the heroine keeps it or moves to the other state.
"""

__version__ = "0.1.0"
__author__ = "Heroine State Team"
