"""
AgencyHub Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """User role within an agency"""

    owner = "owner"
    admin = "admin"
    member = "member"


class InvitationType(str, Enum):
    """Invitation kind - client invitations have no accept workflow yet"""

    member = "member"
    client = "client"
