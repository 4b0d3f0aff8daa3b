"""Aqua Stark Backend: off-chain API for the Aqua Stark game.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Only __version__ lives here: explicit imports elsewhere, no star exports
"""

__version__ = "1.0.0"
