from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from agencyhub.api.error import ClientError, ServerError
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.app.use_cases.auth import (
    GetPasswordStatusUseCase,
    PasswordStatusResponse,
    RegisterOwnerResponse,
    RegisterOwnerUseCase,
    SetPasswordResponse,
    SetPasswordUseCase,
    SignInResponse,
    SignInUseCase,
)
from agencyhub.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Owner signup HTTP request payload

    Field rules (trimming, email format, password length) are enforced by the
    use case so every violation is reported at once.
    """

    name: str = Field("", description="Display name")
    email: str = Field("", description="User email address")
    password: str = Field("", description="Password (min 8 chars)")
    agency_name: str = Field("", description="Agency name")


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=RegisterOwnerResponse
)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Owner Signup

    Creates a user, their agency and an owner membership, then a password
    credential. Returns an access token for the new account.

    Raises:
        - 409 Conflict: ACCOUNT_EXISTS
        - 422 Unprocessable Entity: VALIDATION_ERROR with per-field details
        - 500 Internal Server Error: SIGNUP_FAILED
    """
    use_case = RegisterOwnerUseCase(uow)
    result = await use_case.execute(
        request.name, request.email, request.password, request.agency_name
    )

    if result.is_err():
        error = result.error
        if error.code == "ACCOUNT_EXISTS":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        elif error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == "SIGNUP_FAILED":
            raise ServerError(error, expose_message=True)
        raise ServerError(error)

    return result.value


class SignInRequest(BaseModel):
    """Sign-in payload; invite_token carries an invitation through sign-in"""

    email: str = Field("", description="User email address")
    password: str = Field("", description="User password")
    invite_token: Optional[str] = Field(None, description="Pending invitation token")


@router.post("/sign-in", status_code=status.HTTP_200_OK, response_model=SignInResponse)
async def sign_in(request: SignInRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Email/password sign-in

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 422 Unprocessable Entity: VALIDATION_ERROR
    """
    use_case = SignInUseCase(uow)
    result = await use_case.execute(request.email, request.password, request.invite_token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        raise ServerError(error)

    return result.value


@router.get(
    "/password", status_code=status.HTTP_200_OK, response_model=PasswordStatusResponse
)
async def password_status(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = GetPasswordStatusUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class SetPasswordRequest(BaseModel):
    password: str = Field("", description="New password (min 8 chars)")
    confirm_password: str = Field("", description="Must equal password")


@router.post(
    "/password", status_code=status.HTTP_200_OK, response_model=SetPasswordResponse
)
async def set_password(
    request: SetPasswordRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Set first password

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: NOT_FOUND (user no longer exists)
        - 422 Unprocessable Entity: VALIDATION_ERROR
    """
    use_case = SetPasswordUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]), request.password, request.confirm_password
    )

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
