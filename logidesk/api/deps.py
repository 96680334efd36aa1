"""FastAPI dependencies resolving services from the application container"""
from fastapi import Request

from logidesk.container import ServiceContainer


def get_container(request: Request) -> ServiceContainer:
    """Container attached to app.state by create_app"""
    return request.app.state.container
