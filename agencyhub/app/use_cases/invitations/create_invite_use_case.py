"""
Create Invite Use Case

Handles inviting users to join an agency with a specified role.
"""

import logging
from datetime import timedelta
from typing import Optional, Union
from uuid import UUID

from pydantic import ValidationError

from libs.result import Error, Result, Return
from agencyhub.app.services.token_codec import InviteTokenCodec
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.app.use_cases.validation import field_errors
from agencyhub.domain.base import utcnow
from agencyhub.domain.entities import Invitation, InvitationType, MembershipRole

from .dtos import CreateInviteCommand, CreateInviteResponse

logger = logging.getLogger(__name__)

INVITE_EXPIRATION_DAYS = 7
INVITE_PERMISSION_ROLES = (MembershipRole.owner, MembershipRole.admin)
DEFAULT_BASE_URL = "http://localhost:3000"


def build_invite_url(base_url: str, token: str) -> str:
    normalized_base = base_url[:-1] if base_url.endswith("/") else base_url
    return f"{normalized_base}/invite/{token}"


class CreateInviteUseCase:
    """
    Use case for inviting users to join an agency.

    Business Rules:
    - Only owner/admin memberships may invite
    - With an agency_id, the inviter must be owner/admin of that agency;
      without one, the inviter's earliest-joined owner/admin agency is used
    - No qualifying membership is a returned FORBIDDEN error, nothing written
    - Creates a member invitation with 7-day expiration storing only the
      token hash; the raw token appears only in the returned invite URL
    - Persistence failures are logged and reported with a generic message
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_codec: InviteTokenCodec,
        base_url: Optional[str] = None,
        expiration_days: int = INVITE_EXPIRATION_DAYS,
    ):
        self.uow = uow
        self.token_codec = token_codec
        self.base_url = base_url or DEFAULT_BASE_URL
        self.expiration_days = expiration_days

    async def execute(
        self,
        email: str,
        role: Union[MembershipRole, str, None],
        inviter_user_id: UUID,
        agency_id: Union[UUID, str, None] = None,
    ) -> Result[CreateInviteResponse]:
        """
        Execute create invite use case.

        Args:
            email: Email address to invite
            role: Role to grant (member/admin, blank means member)
            inviter_user_id: User ID of the person sending the invite
            agency_id: Target agency, or None for the implicit one

        Returns:
            Result with CreateInviteResponse DTO, or Error
        """
        try:
            command = CreateInviteCommand(email=email, role=role, agency_id=agency_id)
        except ValidationError as exc:
            return Return.err(
                Error("VALIDATION_ERROR", "Invalid invitation input", field_errors(exc))
            )

        async with self.uow:
            try:
                membership = await self.uow.memberships.get_first_by_user_with_roles(
                    inviter_user_id, INVITE_PERMISSION_ROLES, agency_id=command.agency_id
                )
                if membership is None:
                    return Return.err(
                        Error(
                            "FORBIDDEN",
                            "You do not have permission to invite members for this agency.",
                        )
                    )

                token = self.token_codec.generate_token()
                invitation = Invitation(
                    type=InvitationType.member,
                    email=command.email,
                    agency_id=membership.agency_id,
                    role=command.role,
                    invited_by_user_id=inviter_user_id,
                    expires_at=utcnow() + timedelta(days=self.expiration_days),
                    token_hash=self.token_codec.hash_token(token),
                )
                await self.uow.invitations.create(invitation)
                await self.uow.commit()
            except Exception:
                await self.uow.rollback()
                logger.exception(
                    "create_invite: unable to create member invitation",
                    extra={
                        "inviter_user_id": str(inviter_user_id),
                        "agency_id": str(command.agency_id) if command.agency_id else None,
                    },
                )
                return Return.err(
                    Error("INVITE_CREATE_FAILED", "Unable to create invitation.")
                )

            return Return.ok(
                CreateInviteResponse(
                    invite_id=str(invitation.id),
                    invite_url=build_invite_url(self.base_url, token),
                    email=invitation.email,
                    role=invitation.role.value,
                    agency_id=str(invitation.agency_id),
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
