"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Store failures are mapped to taxonomy errors before they leave this layer
"""
