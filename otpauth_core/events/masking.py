"""
Identity Masking
================
Masks email identities before they leave the library (logs, events,
metrics).
"""


def mask_email(email: str) -> str:
    """
    Mask an email address for safe display.

    Keeps the first and last character of the local part and the whole
    domain.

    Args:
        email: Email address

    Returns:
        Masked email (e.g., "u**r@example.com")
    """
    at_index = email.find("@")
    if at_index <= 1:
        return email

    local_part = email[:at_index]
    domain_part = email[at_index:]

    if len(local_part) > 2:
        masked_local = local_part[0] + "*" * (len(local_part) - 2) + local_part[-1]
    else:
        masked_local = local_part[0] + "*"

    return masked_local + domain_part
