"""Auth Routes — registration and login.

Invariants:
    - register → 201 {message, userId, username, email, fullName}
    - login → 200 with a placeholder token; failures are 400 with a generic message
"""

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_auth_service, require_json
from app.schemas.auth import (
    LoginRequest, LoginResponse, RegisterRequest, RegisterResponse,
)
from app.services import entity_mapper
from app.services.auth_service import AuthService, placeholder_token

router = APIRouter(
    prefix="/api/auth", tags=["auth"], dependencies=[Depends(require_json)],
)


@router.post(
    "/register", response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest, service: AuthService = Depends(get_auth_service),
):
    user = await service.register(body)
    return entity_mapper.to_register_response(user)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest, service: AuthService = Depends(get_auth_service),
):
    user = await service.login(body)
    return entity_mapper.to_login_response(user, placeholder_token(user))
