from typing import Optional
from urllib.parse import quote

from pydantic import ValidationError

from libs.result import Error, Result, Return
from agencyhub.api.utils.jwt import generate_jwt
from agencyhub.app.services.passwords import verify_password
from agencyhub.app.services.unit_of_work import UnitOfWork
from agencyhub.app.use_cases.validation import field_errors

from .dtos import SignInCommand, SignInResponse

DEFAULT_REDIRECT = "/"
INVITE_COMPLETE_PATH = "/invite/complete"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."


class SignInUseCase:
    """
    Email/password sign-in.

    Business Rules:
    - Email is normalized before lookup
    - Unknown email, missing credential and wrong password are
      indistinguishable to the caller (INVALID_CREDENTIALS)
    - A pending invite token sends the user on to complete the invitation
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, email: str, password: str, invite_token: Optional[str] = None
    ) -> Result[SignInResponse]:
        try:
            command = SignInCommand(email=email, password=password)
        except ValidationError as exc:
            return Return.err(
                Error("VALIDATION_ERROR", "Invalid sign-in input", field_errors(exc))
            )

        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)
            credential = (
                await self.uow.credentials.get_by_user_id(user.id) if user else None
            )
            if credential is None or not verify_password(
                command.password, credential.password_hash
            ):
                return Return.err(
                    Error("INVALID_CREDENTIALS", INVALID_CREDENTIALS_MESSAGE)
                )
            user_id = user.id

        invite_token = (invite_token or "").strip()
        if invite_token:
            redirect_to = f"{INVITE_COMPLETE_PATH}?token={quote(invite_token, safe='')}"
        else:
            redirect_to = DEFAULT_REDIRECT

        return Return.ok(
            SignInResponse(
                user_id=str(user_id),
                access_token=generate_jwt(user_id=user_id),
                redirect_to=redirect_to,
            )
        )
