"""
Password hashing helpers.

Hashes are bcrypt with a work factor fixed when the hash is created.
"""

import logging

import bcrypt

logger = logging.getLogger(__name__)

SALT_ROUNDS = 12


def hash_password(plain_password: str, rounds: int = SALT_ROUNDS) -> str:
    """Hash a password with a fresh salt."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a password against a stored bcrypt hash.

    Malformed hashes and passwords bcrypt refuses (over 72 bytes on
    recent releases) count as a mismatch.
    """
    try:
        return bcrypt.checkpw(
            plain_password.encode("utf-8"),
            hashed_password.encode("utf-8"),
        )
    except ValueError as e:
        logger.warning("Password hash check rejected input: %s", e)
        return False
