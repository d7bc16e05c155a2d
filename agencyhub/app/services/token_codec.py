"""
Invite Token Codec

Generates opaque invitation tokens and derives the hash that is stored and
looked up in place of the raw token.
"""

import hashlib
import hmac
import secrets
from typing import Optional

TOKEN_BYTES = 32

HASH_POLICY_HMAC = "hmac"
HASH_POLICY_SHA256 = "sha256"
HASH_POLICIES = (HASH_POLICY_HMAC, HASH_POLICY_SHA256)


class TokenCodecConfigError(RuntimeError):
    """Raised at startup when the configured hash policy cannot be honoured"""


class InviteTokenCodec:
    """
    Invite token generation and hashing.

    Policies:
    - hmac: HMAC-SHA256 keyed with a server-held secret (default). An
      exfiltrated invitations table cannot be enumerated offline without it.
    - sha256: plain SHA-256 of the token.

    The policy is fixed when the codec is built; a missing secret for the
    hmac policy is a configuration error, never a silent fallback.
    """

    def __init__(self, policy: str = HASH_POLICY_HMAC, secret: Optional[str] = None):
        if policy not in HASH_POLICIES:
            raise TokenCodecConfigError(
                f"Unknown invite token hash policy: {policy!r}. "
                f"Must be one of: {', '.join(HASH_POLICIES)}"
            )
        if policy == HASH_POLICY_HMAC and not secret:
            raise TokenCodecConfigError(
                "INVITE_TOKEN_SECRET must be set when INVITE_TOKEN_HASH_POLICY is 'hmac'"
            )

        self.policy = policy
        self._key = secret.encode("utf-8") if secret else None

    @classmethod
    def from_config(cls, config) -> "InviteTokenCodec":
        return cls(
            policy=config.INVITE_TOKEN_HASH_POLICY,
            secret=config.INVITE_TOKEN_SECRET,
        )

    @staticmethod
    def generate_token() -> str:
        """Return a new token: 32 random bytes as 64 hex characters"""
        return secrets.token_hex(TOKEN_BYTES)

    def hash_token(self, token: str) -> str:
        """Derive the lookup/storage hash of a token (64 hex characters)"""
        data = token.encode("utf-8")
        if self.policy == HASH_POLICY_HMAC:
            return hmac.new(self._key, data, hashlib.sha256).hexdigest()
        return hashlib.sha256(data).hexdigest()
