"""
Password Credential Use Cases

Lets a signed-in user without a password credential (e.g. one who joined
through an invitation) set their first password.
"""

from uuid import UUID

from pydantic import ValidationError

from libs.result import Error, Result, Return
from agencyhub.app.services.passwords import hash_password
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.app.use_cases.validation import field_errors
from agencyhub.domain.entities import Credential

from .dtos import PasswordStatusResponse, SetPasswordCommand, SetPasswordResponse

DASHBOARD_PATH = "/"


class GetPasswordStatusUseCase:
    """Reports whether the user still needs to set a password"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[PasswordStatusResponse]:
        async with self.uow:
            credential = await self.uow.credentials.get_by_user_id(user_id)

        if credential is not None:
            return Return.ok(
                PasswordStatusResponse(has_password=True, redirect_to=DASHBOARD_PATH)
            )
        return Return.ok(PasswordStatusResponse(has_password=False))


class SetPasswordUseCase:
    """
    Use case for setting a first password.

    Business Rules:
    - Password must be at least 8 characters and match its confirmation
    - A user who already has a password is sent to the dashboard unchanged
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, password: str, confirm_password: str
    ) -> Result[SetPasswordResponse]:
        try:
            command = SetPasswordCommand(
                password=password, confirm_password=confirm_password
            )
        except ValidationError as exc:
            return Return.err(
                Error("VALIDATION_ERROR", "Invalid password input", field_errors(exc))
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("NOT_FOUND", "User not found"))

            existing = await self.uow.credentials.get_by_user_id(user_id)
            if existing is not None:
                return Return.ok(
                    SetPasswordResponse(status="already_set", redirect_to=DASHBOARD_PATH)
                )

            await self.uow.credentials.create(
                Credential(user_id=user_id, password_hash=hash_password(command.password))
            )
            await self.uow.commit()

        return Return.ok(
            SetPasswordResponse(status="password_set", redirect_to=DASHBOARD_PATH)
        )
