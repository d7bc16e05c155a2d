"""
Signup Owner Use Case

Provisions a new account: user, agency and owner membership as one unit.
"""

import logging

from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.app.use_cases.validation import field_errors
from agencyhub.domain.entities import Agency, Membership, MembershipRole, User

from .dtos import SignupOwnerCommand, SignupOwnerResponse

logger = logging.getLogger(__name__)


class SignupOwnerUseCase:
    """
    Signup Owner Use Case

    Business Logic:
    1. Validate input, normalizing email (trim + lowercase)
    2. Check if email already exists -> ACCOUNT_EXISTS, nothing written
    3. Create User with email_verified=False
    4. Create Agency with the provided name
    5. Create Membership with role=owner
    6. Commit transaction atomically

    The password is validated here but not stored: linking the credential is
    the caller's job and happens after this transaction commits. The users
    email unique constraint backs the existence check against concurrent
    signups; a violation on commit is reported as ACCOUNT_EXISTS too.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, name: str, email: str, password: str, agency_name: str
    ) -> Result[SignupOwnerResponse]:
        """
        Execute signup owner use case

        Returns:
            Result[SignupOwnerResponse] with the new user and agency ids,
            or Error(VALIDATION_ERROR | ACCOUNT_EXISTS | SIGNUP_FAILED)
        """
        try:
            command = SignupOwnerCommand(
                name=name, email=email, password=password, agency_name=agency_name
            )
        except ValidationError as exc:
            return Return.err(
                Error("VALIDATION_ERROR", "Invalid signup input", field_errors(exc))
            )

        # Ids of whatever was created so far, for failure logs
        context = {}

        async with self.uow:
            try:
                existing_user = await self.uow.users.get_by_email(command.email)
                if existing_user:
                    return Return.err(Error("ACCOUNT_EXISTS", "Account already exists"))

                user = await self.uow.users.create(
                    User(name=command.name, email=command.email, email_verified=False)
                )
                context["user_id"] = str(user.id)
                agency = await self.uow.agencies.create(Agency(name=command.agency_name))
                context["agency_id"] = str(agency.id)
                await self.uow.memberships.create(
                    Membership(
                        user_id=user.id,
                        agency_id=agency.id,
                        role=MembershipRole.owner,
                    )
                )
                await self.uow.commit()
            except IntegrityError:
                await self.uow.rollback()
                logger.warning(
                    "signup_owner: email claimed by a concurrent signup",
                    extra=context,
                )
                return Return.err(Error("ACCOUNT_EXISTS", "Account already exists"))
            except Exception:
                await self.uow.rollback()
                logger.exception(
                    "signup_owner: unable to provision account",
                    extra=context,
                )
                return Return.err(Error("SIGNUP_FAILED", "Unable to create account."))

            return Return.ok(
                SignupOwnerResponse(user_id=str(user.id), agency_id=str(agency.id))
            )
