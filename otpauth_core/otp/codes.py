"""
OTP Codes
=========
Generation and comparison of numeric OTP codes.
"""

import hmac
import secrets

from .models import OTP_LENGTH, OTP_MAX, OTP_MIN


def generate_otp() -> str:
    """
    Generate a random 6-digit numeric OTP.

    Draws uniformly from 100000-999999 inclusive, so the code never
    starts with a zero.

    Returns:
        OTP string
    """
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def is_well_formed(code: str) -> bool:
    """Check that a code is exactly six ASCII digits."""
    return len(code) == OTP_LENGTH and code.isascii() and code.isdigit()


def codes_match(submitted: str, expected: str) -> bool:
    """
    Compare a submitted code against the stored one.

    Uses constant-time comparison to prevent timing attacks.
    """
    return hmac.compare_digest(submitted.encode(), expected.encode())
