"""Request dependencies shared by controllers."""

from fastapi import Request

from aqua_stark.infrastructure.dojo_client import DojoClient


def get_dojo_client(request: Request) -> DojoClient:
    """The process-wide DojoClient created with the app."""
    return request.app.state.dojo_client
