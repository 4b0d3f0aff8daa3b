"""Root conftest: shared test configuration."""

import os

# Required settings; tests never reach a real chain or database
os.environ.setdefault("STARKNET_RPC", "http://localhost:5050/rpc")
os.environ.setdefault("CARTRIDGE_AUTH_URL", "http://localhost:8080/auth")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
