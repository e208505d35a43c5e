# inventory/api/v1/routers/auth.py

from fastapi import APIRouter, status

from inventory.api.deps import SettingsDep, UserRepoDep
from inventory.api.v1.schemas.auth import AuthEnvelope, LoginIn, RegisterIn, UserOut
from inventory.domain.services.auth_svc import login_user_svc, register_user_svc

import logging
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthEnvelope,
    response_model_exclude_none=True,
)
async def register(payload: RegisterIn, repo: UserRepoDep, settings: SettingsDep):
    token, user = await register_user_svc(repo, settings, **payload.model_dump())
    return AuthEnvelope(message="User registered successfully", token=token, user=UserOut.from_domain(user))


@router.post("/login", response_model=AuthEnvelope, response_model_exclude_none=True)
async def login(payload: LoginIn, repo: UserRepoDep, settings: SettingsDep):
    token, user = await login_user_svc(repo, settings, **payload.model_dump())
    return AuthEnvelope(token=token, user=UserOut.from_domain(user))
