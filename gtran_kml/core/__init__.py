"""Core utilities and shared infrastructure.

- config: Conversion defaults loaded from the environment
- constants: Named constants (namespace, default keys, type tags)
- exceptions: Conversion exception hierarchy
"""
