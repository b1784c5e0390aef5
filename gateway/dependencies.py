"""
gateway/dependencies.py

FastAPI dependencies shared by the routers.
"""

from fastapi import Request

from gateway.services.store import DeviceStateStore


def get_store(request: Request) -> DeviceStateStore:
    """Return the process-wide store created in the app lifespan."""
    return request.app.state.store
