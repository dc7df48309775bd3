"""
Orchestration Layer - Session Coordination

This layer coordinates one run of the cipher.
- Pure workflow coordination
- No cipher logic
- Composes extract, transform, and load operations
"""
