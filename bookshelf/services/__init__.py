"""Services Layer — application operations composed over core/ protocols.

Invariants:
    - Services receive their store through the constructor (no module-level handles)
"""
