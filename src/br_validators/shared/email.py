"""Email address validation, extraction and domain matching."""

import re
from typing import Optional

from br_validators.core.rules.policy_constants import EMAIL_DOMINIO_MAX, EMAIL_LOCAL_MAX
from br_validators.shared.exceptions import InvalidArgumentError

_FORMATO_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def _validar_parte_local(local: str) -> bool:
    if len(local) > EMAIL_LOCAL_MAX:
        return False
    if local.startswith(".") or local.endswith("."):
        return False
    return ".." not in local


def _validar_dominio(dominio: str) -> bool:
    if len(dominio) > EMAIL_DOMINIO_MAX:
        return False
    if "." not in dominio:
        return False
    if dominio.startswith(".") or dominio.endswith("."):
        return False
    return ".." not in dominio


def _separar(email: str) -> Optional[tuple[str, str]]:
    local, _, dominio = email.partition("@")
    if not local or not dominio:
        return None
    return local, dominio


def validate_email(email: str) -> bool:
    """
    Validate an email address.

    Rules:
    - Shape local@domain, domain ending in a dot and 2+ letters
    - Local part up to 64 chars, no leading/trailing dot, no ".."
    - Domain up to 253 chars, at least one dot, no leading/trailing dot, no ".."

    Args:
        email: Email address (anything other than str is invalid)

    Returns:
        True if valid, False otherwise
    """
    if not isinstance(email, str):
        return False
    if not _FORMATO_EMAIL.fullmatch(email):
        return False

    partes = _separar(email)
    if partes is None:
        return False

    local, dominio = partes
    return _validar_parte_local(local) and _validar_dominio(dominio)


def extract_domain(email: str) -> Optional[str]:
    """Return the domain of a valid email, None otherwise."""
    if not validate_email(email):
        return None
    partes = _separar(email)
    return partes[1] if partes else None


def extract_local_part(email: str) -> Optional[str]:
    """Return the local part of a valid email, None otherwise."""
    if not validate_email(email):
        return None
    partes = _separar(email)
    return partes[0] if partes else None


def _dominio_coincide(dominio_email: str, dominio_alvo: str) -> bool:
    return dominio_email == dominio_alvo or dominio_email.endswith("." + dominio_alvo)


def _segmentos_coincidem(dominio_email: str, dominio_alvo: str) -> bool:
    segmentos_email = dominio_email.split(".")
    segmentos_alvo = dominio_alvo.split(".")
    if len(segmentos_email) < len(segmentos_alvo):
        return False
    return segmentos_email[-len(segmentos_alvo) :] == segmentos_alvo


def is_from_domain(email: str, dominio: str) -> bool:
    """Check whether an email belongs to a domain or one of its subdomains.

    Comparison is case-insensitive. "user@sub.example.com" belongs to
    "example.com"; "user@notexample.com" does not.

    Args:
        email: Email address
        dominio: Target domain (e.g., "example.com")

    Returns:
        False when the email is invalid or the domain is missing/empty
    """
    if not validate_email(email) or not isinstance(dominio, str) or not dominio:
        return False

    dominio_email = extract_domain(email)
    if not dominio_email:
        return False

    dominio_email = dominio_email.lower()
    dominio_alvo = dominio.lower()

    # Both checks are kept as independent guards
    if _dominio_coincide(dominio_email, dominio_alvo):
        return True
    return _segmentos_coincidem(dominio_email, dominio_alvo)


def normalize_email(email: str) -> str:
    """Trim surrounding whitespace and lowercase.

    Does not validate; a malformed email is normalized like any other string.

    Raises:
        InvalidArgumentError: If email is None or not a string
    """
    if email is None:
        raise InvalidArgumentError("Email não pode ser nulo")
    if not isinstance(email, str):
        raise InvalidArgumentError(f"Email deve ser texto, recebido {type(email).__name__}")
    return email.strip().lower()
