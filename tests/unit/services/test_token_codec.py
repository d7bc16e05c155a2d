import hashlib
import hmac
import re

import pytest

from agencyhub.app.services.token_codec import InviteTokenCodec, TokenCodecConfigError


def test_generated_tokens_are_64_hex_chars_and_unique():
    tokens = {InviteTokenCodec.generate_token() for _ in range(50)}

    assert len(tokens) == 50
    for token in tokens:
        assert re.fullmatch(r"[0-9a-f]{64}", token)


def test_hmac_policy_uses_secret():
    codec = InviteTokenCodec(policy="hmac", secret="s3cret")

    expected = hmac.new(b"s3cret", b"abc", hashlib.sha256).hexdigest()
    assert codec.hash_token("abc") == expected
    assert codec.hash_token("abc") == codec.hash_token("abc")


def test_different_secrets_give_different_hashes():
    first = InviteTokenCodec(policy="hmac", secret="one")
    second = InviteTokenCodec(policy="hmac", secret="two")

    assert first.hash_token("abc") != second.hash_token("abc")


def test_sha256_policy_is_plain_digest():
    codec = InviteTokenCodec(policy="sha256")

    assert codec.hash_token("abc") == hashlib.sha256(b"abc").hexdigest()


def test_hmac_policy_without_secret_fails_fast():
    with pytest.raises(TokenCodecConfigError):
        InviteTokenCodec(policy="hmac", secret=None)


def test_unknown_policy_is_rejected():
    with pytest.raises(TokenCodecConfigError):
        InviteTokenCodec(policy="md5", secret="x")


def test_from_config_reads_policy_and_secret():
    class Config:
        INVITE_TOKEN_HASH_POLICY = "sha256"
        INVITE_TOKEN_SECRET = None

    codec = InviteTokenCodec.from_config(Config)

    assert codec.policy == "sha256"
