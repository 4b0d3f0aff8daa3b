"""Route Modules: one file per resource.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Handlers coerce parameter shapes, call exactly one service operation inside
      try, and return build_success / build_error through respond(); they never raise
"""
