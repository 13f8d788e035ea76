"""Utility functions for masking personal data in logs and outputs."""

from typing import Any, Dict, FrozenSet

# Testee fields that never reach a log line in clear text
_PERSONAL_KEYS: FrozenSet[str] = frozenset({"mobile_phone", "email_address", "date_of_birth"})


def mask_email(email: str) -> str:
    """
    Mask email address for logging purposes.

    Example: user@example.com -> u***@e***.com

    Args:
        email: Email address to mask

    Returns:
        Masked email address
    """
    if not email or "@" not in email:
        return "***"

    local, _, domain = email.partition("@")
    masked_local = local[0] + "***" if local else "***"

    if "." in domain:
        name, _, tld = domain.rpartition(".")
        masked_domain = (name[0] + "***" if name else "***") + "." + tld
    else:
        masked_domain = "***"

    return f"{masked_local}@{masked_domain}"


def mask_phone(phone: str) -> str:
    """
    Mask phone number for logging purposes.

    Example: +31612345678 -> +***5678

    Args:
        phone: Phone number to mask

    Returns:
        Masked phone number
    """
    if not phone or len(phone) < 4:
        return "***"

    if phone.startswith("+"):
        return "+" + "***" + phone[-4:]
    return "***" + phone[-4:]


def mask_personal_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of a nested dict with testee personal fields masked.

    Args:
        data: Dictionary (e.g. a dumped configuration)

    Returns:
        New dictionary safe for logging
    """
    masked: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            masked[key] = mask_personal_data(value)
        elif key in _PERSONAL_KEYS and isinstance(value, str):
            if key == "mobile_phone":
                masked[key] = mask_phone(value)
            elif key == "email_address":
                masked[key] = mask_email(value)
            else:
                masked[key] = "***"
        else:
            masked[key] = value
    return masked
