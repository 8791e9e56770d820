"""Password hashing utilities (bcrypt)."""

import bcrypt


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash password using bcrypt.

    Args:
        password: Plain-text password
        rounds: bcrypt cost factor

    Returns:
        Encoded bcrypt digest
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hashed value.

    Malformed digests never match.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False
