"""
Continue Invite Use Case

Routes an invitee from the invite preview to sign-in.
"""

from urllib.parse import quote, urlencode

from libs.result import Result, Return
from agencyhub.app.services.token_codec import InviteTokenCodec
from agencyhub.app.services.unit_of_work import UnitOfWork

from .dtos import InviteRedirectResponse
from .get_valid_invitation_use_case import find_valid_invitation


class ContinueInviteUseCase:
    """
    Business Rules:
    - A usable invitation sends the invitee to sign-in with their email and
      the token pre-filled
    - Anything else goes back to the preview so it can show the error
    """

    def __init__(self, uow: UnitOfWork, token_codec: InviteTokenCodec):
        self.uow = uow
        self.token_codec = token_codec

    async def execute(self, token: str) -> Result[InviteRedirectResponse]:
        async with self.uow:
            found = await find_valid_invitation(self.uow, self.token_codec, token)
            if found.is_err():
                return Return.ok(
                    InviteRedirectResponse(redirect_to=f"/invite/{quote(token, safe='')}")
                )
            email = found.value.email

        query = urlencode({"email": email, "inviteToken": token})
        return Return.ok(InviteRedirectResponse(redirect_to=f"/sign-in?{query}"))
