"""Core Layer — Infra Standard primitives, no IO, no logging setup, no config.

Invariants:
    - No module in core/ imports from infrastructure/ or config
    - All functions are pure and deterministic
    - Inputs are never mutated; sequences come back as new objects

Design Decisions:
    - Separate entry points for text (str) and byte sequences (bytes): the
      Infra Standard abstracts over both, Python keeps them distinct types
"""
