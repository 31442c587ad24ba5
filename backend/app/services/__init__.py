"""Services Layer — imperative shell that wires core logic to the API.

Invariants:
    - Services may log; core/ may not
"""
