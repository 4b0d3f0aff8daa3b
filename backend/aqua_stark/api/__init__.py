"""API Layer: FastAPI controllers, envelope responses and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every body leaving the API is a success or error envelope (core/responses.py)

Design Decisions:
    - Thin controllers delegate to services; they only coerce parameter shapes
"""
