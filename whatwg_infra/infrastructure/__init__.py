"""Infrastructure Layer — cross-cutting concerns for host applications.

Invariants:
    - Infrastructure never imports from core/ domain logic
    - Nothing here runs on import
"""
