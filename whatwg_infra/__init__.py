"""WHATWG Infra primitives for Python.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
      (e.g. ``from whatwg_infra.core.whitespace import strip_collapse_whitespace``)
"""
