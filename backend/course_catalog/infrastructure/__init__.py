"""Infrastructure Layer: database session management and logging setup.

Invariants:
    - Infrastructure never imports from core/ catalog logic (errors excepted)
"""
