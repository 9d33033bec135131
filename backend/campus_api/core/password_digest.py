"""Password Digest — the one-way hash stored in place of plaintext passwords.

Invariants:
    - Digest is SHA-256 over the UTF-8 bytes of the password
    - Encoding is lowercase hex, two zero-padded digits per byte, no separators
      (64 characters); stored digests are compared as opaque strings
"""

import hashlib
import hmac


def hash_password(password: str) -> str:
    """Digest a plaintext password for storage."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def password_matches(password: str, stored_digest: str) -> bool:
    """Compare the digest of ``password`` with a stored digest."""
    return hmac.compare_digest(
        hash_password(password).encode("ascii"),
        stored_digest.encode("utf-8"),
    )
