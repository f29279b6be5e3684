"""
Core polynomial model, numeric primitives, and contracts.

This module contains the foundational building blocks that the division
and root-finding algorithms in src.polynomial are built on: the immutable
Polynomial value type, array alignment helpers, numerical safeguards,
error types, and JSON Schema contracts for diagnostic output.
"""
