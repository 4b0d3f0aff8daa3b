"""Services Layer: per-entity business logic.

Invariants:
    - Every operation is validate -> query -> classify absence/failure -> map -> return
    - Failures are always taxonomy errors (core/errors.py)
    - No in-memory authoritative state: every read re-queries the store

Design Decisions:
    - One service class per entity, constructed per request around the request's session
    - Mutating operations call the chain first, then write rows and the sync queue item
      in one commit
"""
