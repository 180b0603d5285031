"""Kernel – shared primitives with no I/O."""
