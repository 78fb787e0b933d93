"""Request-scoped dependencies shared by the routers"""

from typing import Optional
from fastapi import Header, Request, status
from creative_boost.api.error import ClientError
from creative_boost.app.use_cases.creative_boost.dtos import ActorDTO
from creative_boost.libs.result import Error

SYSTEM_ACTOR = ActorDTO(id="system", full_name="System")


def get_config(request: Request):
    return request.app.state.config


async def get_actor(
    request: Request,
    x_actor_id: Optional[str] = Header(default=None),
    x_actor_name: Optional[str] = Header(default=None),
) -> ActorDTO:
    """
    Identity of the caller for the settings audit trail

    Authentication happens upstream; this service only consumes the
    X-Actor-Id / X-Actor-Name headers set by the gateway.
    """
    if x_actor_id:
        return ActorDTO(id=x_actor_id, full_name=x_actor_name or x_actor_id)

    if get_config(request).AUTH_DISABLED:
        return SYSTEM_ACTOR

    raise ClientError(
        Error(code="UNAUTHENTICATED", message="Missing X-Actor-Id header"),
        status_code=status.HTTP_401_UNAUTHORIZED,
    )
