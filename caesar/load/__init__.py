"""
Load Layer - Presenting Results

This layer handles all output to the terminal.
- Banner and result formatting
- No cipher logic, just presentation
"""
