"""
Core domain models, mathematical primitives, and invariants.

This module contains the BigInt value type and everything it is built from;
it performs no I/O and is independent of the calculator front end.
"""
