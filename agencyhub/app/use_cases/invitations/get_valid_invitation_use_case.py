"""
Get Valid Invitation Use Case

Classifies an invitation token as usable or as one of its terminal states.
"""

from libs.result import Error, Result, Return
from agencyhub.app.services.token_codec import InviteTokenCodec
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.domain.base import utcnow
from agencyhub.domain.entities import Invitation

from .dtos import InvitationRecord
from .errors import MESSAGE_BY_CODE, InviteErrorCode


def _invite_error(code: InviteErrorCode) -> Error:
    return Error(code.value, MESSAGE_BY_CODE[code])


async def find_valid_invitation(
    uow: UnitOfWork, token_codec: InviteTokenCodec, token: str
) -> Result[Invitation]:
    """
    Look up an invitation by token inside an already-open unit of work.

    Checks run in priority order: NOT_FOUND, EXPIRED, CONSUMED. Expiry is
    compared with the current time, so an expired invitation reports
    EXPIRED even if it was never consumed.
    """
    invitation = await uow.invitations.get_by_token_hash(token_codec.hash_token(token))

    if invitation is None:
        return Return.err(_invite_error(InviteErrorCode.NOT_FOUND))

    if invitation.expires_at < utcnow():
        return Return.err(_invite_error(InviteErrorCode.EXPIRED))

    if invitation.consumed_at is not None:
        return Return.err(_invite_error(InviteErrorCode.CONSUMED))

    return Return.ok(invitation)


class GetValidInvitationUseCase:
    """
    Read-only invitation check used to preview an invite link.

    Business Rules:
    - No side effects; safe to call any number of times
    - Returns the full record (minus the token hash) when usable
    """

    def __init__(self, uow: UnitOfWork, token_codec: InviteTokenCodec):
        self.uow = uow
        self.token_codec = token_codec

    async def execute(self, token: str) -> Result[InvitationRecord]:
        async with self.uow:
            result = await find_valid_invitation(self.uow, self.token_codec, token)
            if result.is_err():
                return result

            return Return.ok(InvitationRecord.from_entity(result.value))
