"""
Extract Layer - Reading User Input

This layer handles all interactive input with no cipher logic.
- No imports from load or orchestration layers
- Prompts return validated values, re-prompting on bad input
- An unreadable or closed input stream is fatal and surfaces as InputReadError
"""
