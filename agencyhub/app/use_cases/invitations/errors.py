"""
Invitation error codes and the user-facing message for each.
"""

from enum import Enum


class InviteErrorCode(str, Enum):
    """Terminal states of an invitation token"""

    NOT_FOUND = "NOT_FOUND"
    EXPIRED = "EXPIRED"
    CONSUMED = "CONSUMED"
    INVALID = "INVALID"


# Client invitations exist in the data model but have no accept workflow
NOT_IMPLEMENTED = "NOT_IMPLEMENTED"

DEFAULT_INVITE_ERROR_MESSAGE = "Unable to accept invitation."

MESSAGE_BY_CODE = {
    InviteErrorCode.NOT_FOUND: "Invite link was not found.",
    InviteErrorCode.EXPIRED: "Invite link has expired.",
    InviteErrorCode.CONSUMED: "Invite link has already been used.",
    InviteErrorCode.INVALID: "Invite link is invalid.",
}
