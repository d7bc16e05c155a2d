"""
Complete Invite Use Case

Accepts an invitation for the signed-in user and decides where they land.
"""

from typing import Union
from uuid import UUID

from libs.result import Result, Return
from agencyhub.app.services.token_codec import InviteTokenCodec
from agencyhub.app.services.unit_of_work import UnitOfWork

from .accept_invite_use_case import AcceptInviteUseCase
from .dtos import InviteRedirectResponse

DASHBOARD_PATH = "/"
SET_PASSWORD_PATH = "/set-password"


class CompleteInviteUseCase:
    """
    Business Rules:
    - Acceptance errors are returned unchanged
    - Users who joined without a password are sent to set one
    """

    def __init__(self, uow: UnitOfWork, token_codec: InviteTokenCodec):
        self.uow = uow
        self.token_codec = token_codec

    async def execute(
        self, token: str, user_id: Union[UUID, str]
    ) -> Result[InviteRedirectResponse]:
        accepted = await AcceptInviteUseCase(self.uow, self.token_codec).execute(
            token, user_id
        )
        if accepted.is_err():
            return accepted

        async with self.uow:
            credential = await self.uow.credentials.get_by_user_id(
                UUID(str(user_id))
            )

        redirect_to = DASHBOARD_PATH if credential is not None else SET_PASSWORD_PATH
        return Return.ok(InviteRedirectResponse(redirect_to=redirect_to))
