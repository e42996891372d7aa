"""FastAPI dependency injection for sheetstock services."""

from typing import Annotated

from fastapi import Depends, Request

from sheetstock.application.factory import ServiceFactory


def get_service_factory(request: Request) -> ServiceFactory:
    """Return the factory the application was created with."""
    return request.app.state.factory


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
