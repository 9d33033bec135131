"""Password Digest — SHA-256 lowercase hex encoding must stay byte-for-byte stable."""

from campus_api.core.password_digest import hash_password, password_matches


def test_hash_matches_known_sha256_vector():
    assert hash_password("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_hash_of_empty_string():
    assert hash_password("") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_hash_is_64_lowercase_hex_chars():
    digest = hash_password("alias?notI")
    assert len(digest) == 64
    assert digest == digest.lower()
    assert all(c in "0123456789abcdef" for c in digest)


def test_hash_encodes_utf8():
    assert hash_password("contraseña") != hash_password("contrasena")
    assert len(hash_password("контроль")) == 64


def test_password_matches_correct_password():
    assert password_matches("password123", hash_password("password123"))


def test_password_matches_rejects_wrong_password():
    assert not password_matches("wrongpassword", hash_password("password123"))


def test_password_matches_rejects_uppercase_stored_digest():
    stored = hash_password("password123").upper()
    assert not password_matches("password123", stored)
