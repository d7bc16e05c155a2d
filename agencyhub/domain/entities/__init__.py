"""
AgencyHub Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import InvitationType, MembershipRole

# Export all entities
from .user import User
from .agency import Agency
from .membership import Membership
from .invitation import Invitation
from .credential import PASSWORD_PROVIDER_ID, Credential

__all__ = [
    # Enums
    "MembershipRole",
    "InvitationType",
    # Entities
    "User",
    "Agency",
    "Membership",
    "Invitation",
    "Credential",
    "PASSWORD_PROVIDER_ID",
]
