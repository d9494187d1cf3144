"""
Core domain models, mathematical primitives, and invariants.

This module contains the temperature value model: six scales, the
conversion table and absolute-zero validation. It has no I/O and no state.
"""
