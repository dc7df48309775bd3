"""
Transformation Layer - Pure, Deterministic Functions

This layer contains the cipher itself and the parsing of raw user input.
- Pure functions (input → output)
- No I/O operations
- Unit testable
- Deterministic results
"""
