"""
Utility functions module.

Time Semantics:
- State guards read the wall clock as whole seconds since the Unix epoch
- Fractional seconds are truncated, never rounded
"""
