"""Signup route."""

from fastapi import APIRouter, Depends

from hospital.api.dependencies import get_user_repository
from hospital.core.repository_protocols import UserRepository
from hospital.schemas.common import MessageResponse
from hospital.schemas.user import SignupRequest
from hospital.services.signup import register_user

router = APIRouter(prefix="/api", tags=["users"])


@router.post("/signup", response_model=MessageResponse)
async def sign_up(
    body: SignupRequest,
    users: UserRepository = Depends(get_user_repository),
):
    await register_user(users, body)
    return MessageResponse(message="User created successfully")
