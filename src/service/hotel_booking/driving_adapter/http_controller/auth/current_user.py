from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from opentelemetry import trace

from src.platform.config.di import Container
from src.service.hotel_booking.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user_id(
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> int:
    """Resolve the caller from the Bearer token (stateless, no DB query)."""
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span('auth.get_current_user_id') as span:
        token = credentials.credentials if credentials else None
        user_id = jwt_auth.get_current_user_id_from_jwt(token)
        span.set_attribute('user.id', user_id)
        return user_id
