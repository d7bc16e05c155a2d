from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from libs.result import Error
from agencyhub.api.error import ClientError, ServerError
from agencyhub.app.services.token_codec import InviteTokenCodec
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.app.use_cases.invitations import (
    NOT_IMPLEMENTED,
    CompleteInviteUseCase,
    ContinueInviteUseCase,
    CreateInviteResponse,
    CreateInviteUseCase,
    GetValidInvitationUseCase,
    InvitationRecord,
    InviteErrorCode,
    InviteRedirectResponse,
)
from agencyhub.depends import (
    get_app_config,
    get_current_user,
    get_token_codec,
    get_unit_of_work,
)

router = APIRouter(tags=["Invitations"])

INVITE_ERROR_STATUS = {
    InviteErrorCode.NOT_FOUND.value: status.HTTP_404_NOT_FOUND,
    InviteErrorCode.EXPIRED.value: status.HTTP_410_GONE,
    InviteErrorCode.CONSUMED.value: status.HTTP_409_CONFLICT,
    InviteErrorCode.INVALID.value: status.HTTP_400_BAD_REQUEST,
}


def raise_invite_error(error: Error):
    if error.code in INVITE_ERROR_STATUS:
        raise ClientError(error, status_code=INVITE_ERROR_STATUS[error.code])
    elif error.code == NOT_IMPLEMENTED:
        raise ServerError(
            error, status_code=status.HTTP_501_NOT_IMPLEMENTED, expose_message=True
        )
    raise ServerError(error)


class CreateInviteRequest(BaseModel):
    """
    Invite form payload

    role and agency_id may be blank; normalisation happens in the use case.
    """

    email: str = Field("", description="Invitee email address")
    role: Optional[str] = Field(None, description="member or admin (default member)")
    agency_id: Optional[str] = Field(
        None, description="Target agency; defaults to the inviter's first agency"
    )


@router.post(
    "/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateInviteResponse,
)
async def create_invitation(
    request: CreateInviteRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: InviteTokenCodec = Depends(get_token_codec),
    config=Depends(get_app_config),
):
    """
    Create Member Invitation

    Only owners and admins may invite. The response carries the invite link,
    which is the only place the raw token ever appears.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: FORBIDDEN
        - 422 Unprocessable Entity: VALIDATION_ERROR
        - 500 Internal Server Error: INVITE_CREATE_FAILED
    """
    use_case = CreateInviteUseCase(
        uow,
        token_codec,
        base_url=config.APP_URL,
        expiration_days=config.INVITE_EXPIRATION_DAYS,
    )
    result = await use_case.execute(
        request.email,
        request.role,
        UUID(current_user["user_id"]),
        agency_id=request.agency_id,
    )

    if result.is_err():
        error = result.error
        if error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)
        elif error.code == "INVITE_CREATE_FAILED":
            raise ServerError(error, expose_message=True)
        raise ServerError(error)

    return result.value


@router.get(
    "/invite/{token}", status_code=status.HTTP_200_OK, response_model=InvitationRecord
)
async def preview_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: InviteTokenCodec = Depends(get_token_codec),
):
    """
    Invite Preview

    Raises:
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CONSUMED
        - 410 Gone: EXPIRED
    """
    result = await GetValidInvitationUseCase(uow, token_codec).execute(token)

    if result.is_err():
        raise_invite_error(result.error)

    return result.value


@router.post(
    "/invite/{token}/continue",
    status_code=status.HTTP_200_OK,
    response_model=InviteRedirectResponse,
)
async def continue_invitation(
    token: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: InviteTokenCodec = Depends(get_token_codec),
):
    result = await ContinueInviteUseCase(uow, token_codec).execute(token)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class CompleteInviteRequest(BaseModel):
    token: str = Field("", description="Invitation token")


@router.post(
    "/invite/complete",
    status_code=status.HTTP_200_OK,
    response_model=InviteRedirectResponse,
)
async def complete_invitation(
    request: CompleteInviteRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_codec: InviteTokenCodec = Depends(get_token_codec),
):
    """
    Accept Invitation for the signed-in user

    Raises:
        - 400 Bad Request: INVALID
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: NOT_FOUND
        - 409 Conflict: CONSUMED
        - 410 Gone: EXPIRED
        - 501 Not Implemented: client invitations
    """
    use_case = CompleteInviteUseCase(uow, token_codec)
    result = await use_case.execute(request.token, current_user["user_id"])

    if result.is_err():
        raise_invite_error(result.error)

    return result.value
