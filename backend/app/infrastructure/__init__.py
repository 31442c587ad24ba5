"""Infrastructure Layer — process-level concerns (logging setup).

Invariants:
    - No domain logic; core/ never imports from here
"""
