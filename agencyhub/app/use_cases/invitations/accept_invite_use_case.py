"""
Accept Invite Use Case

Consumes an invitation token and grants the accepting user a membership in
the invitation's agency.
"""

import logging
from typing import Union
from uuid import UUID

from pydantic import ValidationError

from libs.result import Error, Result, Return
from agencyhub.app.services.token_codec import InviteTokenCodec
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.domain.base import utcnow
from agencyhub.domain.entities import InvitationType, Membership, MembershipRole

from .dtos import AcceptInviteCommand, AcceptInviteResponse
from .errors import (
    DEFAULT_INVITE_ERROR_MESSAGE,
    MESSAGE_BY_CODE,
    NOT_IMPLEMENTED,
    InviteErrorCode,
)
from .get_valid_invitation_use_case import find_valid_invitation

logger = logging.getLogger(__name__)


class AcceptInviteUseCase:
    """
    Use case for accepting an agency invitation.

    Business Rules:
    - Token and user id must be present before anything is looked up
    - NOT_FOUND / EXPIRED / CONSUMED from validation are passed through
    - Client invitations are rejected with NOT_IMPLEMENTED and left untouched
    - A member invitation without an agency is INVALID
    - One transaction: conditional UPDATE of consumed_at (must affect exactly
      one row, else CONSUMED), then the membership unless it already exists
    - Concurrent accepts of one token: only one sees consumed_at IS NULL
    - Unexpected errors are rolled back, logged with context and reported
      with a generic message; nothing is retried
    """

    def __init__(self, uow: UnitOfWork, token_codec: InviteTokenCodec):
        self.uow = uow
        self.token_codec = token_codec

    async def execute(
        self, token: str, user_id: Union[UUID, str]
    ) -> Result[AcceptInviteResponse]:
        """
        Execute accept invite use case.

        Args:
            token: Raw invitation token from the invite link
            user_id: ID of the signed-in user accepting the invitation

        Returns:
            Result with AcceptInviteResponse DTO, or Error with one of
            NOT_FOUND, EXPIRED, CONSUMED, INVALID, NOT_IMPLEMENTED
        """
        try:
            command = AcceptInviteCommand(token=token, user_id=user_id)
        except ValidationError:
            return Return.err(
                Error(InviteErrorCode.INVALID.value, "Invalid invitation details.")
            )

        # Filled in as the invitation is resolved, for failure logs
        context = {"user_id": str(command.user_id)}

        async with self.uow:
            try:
                found = await find_valid_invitation(
                    self.uow, self.token_codec, command.token
                )
                if found.is_err():
                    return found

                invitation = found.value
                invitation_id = invitation.id
                agency_id = invitation.agency_id
                role = invitation.role or MembershipRole.member
                context.update(
                    invite_id=str(invitation_id),
                    agency_id=str(agency_id) if agency_id else None,
                    role=role.value,
                    invitation_type=invitation.type.value,
                )

                if invitation.type == InvitationType.client:
                    return Return.err(
                        Error(NOT_IMPLEMENTED, "Client invitations are not supported yet.")
                    )

                if agency_id is None:
                    return Return.err(
                        Error(
                            InviteErrorCode.INVALID.value,
                            "Invitation is missing an agency.",
                        )
                    )

                consumed = await self.uow.invitations.mark_consumed(invitation_id, utcnow())
                if consumed != 1:
                    await self.uow.rollback()
                    return Return.err(
                        Error(
                            InviteErrorCode.CONSUMED.value,
                            MESSAGE_BY_CODE[InviteErrorCode.CONSUMED],
                        )
                    )

                existing_membership = await self.uow.memberships.get_by_user_and_agency(
                    command.user_id, agency_id
                )
                if existing_membership is None:
                    await self.uow.memberships.create(
                        Membership(user_id=command.user_id, agency_id=agency_id, role=role)
                    )

                await self.uow.commit()
            except Exception:
                await self.uow.rollback()
                logger.exception("accept_invite: unexpected error", extra=context)
                return Return.err(
                    Error(InviteErrorCode.INVALID.value, DEFAULT_INVITE_ERROR_MESSAGE)
                )

        return Return.ok(
            AcceptInviteResponse(
                invitation_id=str(invitation_id),
                agency_id=str(agency_id),
                role=role.value,
            )
        )
