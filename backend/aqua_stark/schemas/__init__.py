"""API Schemas: Pydantic models for request bodies and envelope payloads.

Invariants:
    - Response models are what services return; controllers never build dicts by hand
    - Request models check shape only; content rules live in the service layer
"""
