"""
Register Owner Use Case

Full owner signup flow: provision the account, link the password
credential, then issue an access token.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from agencyhub.api.utils.jwt import generate_jwt
from agencyhub.app.services.passwords import hash_password
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.domain.entities import Credential

from .dtos import RegisterOwnerResponse
from .signup_owner_use_case import SignupOwnerUseCase

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT = "/"


class RegisterOwnerUseCase:
    """
    Use case for registering a new agency owner.

    Business Rules:
    - Provisioning (user + agency + owner membership) commits first, on its own
    - The password credential is linked in a second transaction
    - If linking fails, the provisioned membership, agency and user are
      deleted best-effort; a failed cleanup is logged and not retried
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, name: str, email: str, password: str, agency_name: str
    ) -> Result[RegisterOwnerResponse]:
        provisioned = await SignupOwnerUseCase(self.uow).execute(
            name, email, password, agency_name
        )
        if provisioned.is_err():
            return provisioned

        user_id = UUID(provisioned.value.user_id)
        agency_id = UUID(provisioned.value.agency_id)

        try:
            async with self.uow:
                await self.uow.credentials.create(
                    Credential(user_id=user_id, password_hash=hash_password(password))
                )
                await self.uow.commit()
        except Exception:
            logger.exception(
                "register_owner: unable to link password credential",
                extra={"user_id": str(user_id), "agency_id": str(agency_id)},
            )
            await self._discard_account(user_id, agency_id)
            return Return.err(Error("SIGNUP_FAILED", "Unable to create account."))

        return Return.ok(
            RegisterOwnerResponse(
                user_id=str(user_id),
                agency_id=str(agency_id),
                access_token=generate_jwt(user_id=user_id),
                redirect_to=DEFAULT_REDIRECT,
            )
        )

    async def _discard_account(self, user_id: UUID, agency_id: UUID) -> None:
        """Delete what provisioning created; best-effort, never raises"""
        try:
            async with self.uow:
                membership = await self.uow.memberships.get_by_user_and_agency(
                    user_id, agency_id
                )
                if membership:
                    await self.uow.memberships.delete(membership)

                agency = await self.uow.agencies.get_by_id(agency_id)
                if agency:
                    await self.uow.agencies.delete(agency)

                user = await self.uow.users.get_by_id(user_id)
                if user:
                    await self.uow.users.delete(user)

                await self.uow.commit()
        except Exception:
            logger.exception(
                "register_owner: failed to clean up user %s",
                user_id,
                extra={"user_id": str(user_id), "agency_id": str(agency_id)},
            )
