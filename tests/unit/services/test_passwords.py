from agencyhub.app.services.passwords import hash_password, verify_password


def test_hash_is_bcrypt_and_verifies():
    password_hash = hash_password("correct horse")

    assert password_hash.startswith("$2b$12$")
    assert verify_password("correct horse", password_hash)
    assert not verify_password("wrong horse", password_hash)


def test_malformed_hash_does_not_verify():
    assert not verify_password("anything", "not-a-bcrypt-hash")
