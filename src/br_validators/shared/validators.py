"""CPF and CNPJ validation, formatting, generation and format recognition.

Both identifiers share one modulo 11 engine; everything that differs between
them (length, weight tables, mask layout) lives in their IdentifierKind.
100% local - no external API calls.
"""

import logging
import random
import re
from functools import lru_cache
from typing import Optional, Union

from br_validators.core.models.enums import TipoIdentificador
from br_validators.core.models.identifier import IdentifierKind
from br_validators.core.rules.policy_constants import IDENTIFICADORES
from br_validators.shared.checksum import (
    calcular_digito_verificador,
    calcular_digitos_verificadores,
)
from br_validators.shared.exceptions import (
    IdentifierLengthError,
    UnknownIdentifierKindError,
)

logger = logging.getLogger(__name__)

KindLike = Union[TipoIdentificador, IdentifierKind, str]

_NAO_DIGITO = re.compile(r"[^0-9]")


def get_kind(kind: KindLike) -> IdentifierKind:
    """Resolve a kind given as enum, name ("cpf", "CNPJ") or descriptor.

    Raises:
        UnknownIdentifierKindError: If the name is not a supported kind
    """
    if isinstance(kind, IdentifierKind):
        return kind
    if isinstance(kind, TipoIdentificador):
        return IDENTIFICADORES[kind]
    if isinstance(kind, str):
        try:
            return IDENTIFICADORES[TipoIdentificador(kind.strip().lower())]
        except ValueError:
            pass
    raise UnknownIdentifierKindError(f"Tipo de identificador desconhecido: {kind!r}")


def unmask_identifier(valor: str) -> str:
    """Remove every non-digit character.

    Never fails for a string; the result may have any length, so callers
    must still check length and check digits.
    """
    return _NAO_DIGITO.sub("", valor)


# === Validation ===


def validar_identificador(kind: KindLike, valor: str) -> tuple[bool, str]:
    """Validate an identifier and return reason if invalid.

    Args:
        kind: Identifier kind (CPF or CNPJ)
        valor: Identifier string (can contain formatting characters)

    Returns:
        (True, "") if valid
        (False, "reason") if invalid
    """
    descritor = get_kind(kind)

    if not isinstance(valor, str):
        return False, f"{descritor.nome} deve ser texto"

    digitos = unmask_identifier(valor)

    if len(digitos) != descritor.comprimento:
        return False, f"{descritor.nome} deve ter {descritor.comprimento} dígitos, tem {len(digitos)}"

    # Same-digit sequences pass the checksum but are never issued
    if digitos == digitos[0] * descritor.comprimento:
        return False, f"{descritor.nome} com todos dígitos iguais é inválido"

    base = descritor.tamanho_base
    digito1 = calcular_digito_verificador(digitos[:base], descritor.pesos_primeiro_digito)
    if int(digitos[base]) != digito1:
        return False, f"Primeiro dígito verificador inválido (esperado {digito1})"

    digito2 = calcular_digito_verificador(digitos[: base + 1], descritor.pesos_segundo_digito)
    if int(digitos[base + 1]) != digito2:
        return False, f"Segundo dígito verificador inválido (esperado {digito2})"

    return True, ""


def validate_identifier(kind: KindLike, valor: str) -> bool:
    """
    Validate a CPF or CNPJ number.

    Args:
        kind: Identifier kind (CPF or CNPJ)
        valor: Identifier string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    valido, _ = validar_identificador(kind, valor)
    return valido


def validate_cpf(cpf: str) -> bool:
    """Validate Brazilian CPF number."""
    return validate_identifier(TipoIdentificador.CPF, cpf)


def validate_cnpj(cnpj: str) -> bool:
    """Validate Brazilian CNPJ number."""
    return validate_identifier(TipoIdentificador.CNPJ, cnpj)


def validar_cpf(cpf: str) -> tuple[bool, str]:
    """Validate CPF and return reason if invalid."""
    return validar_identificador(TipoIdentificador.CPF, cpf)


def validar_cnpj(cnpj: str) -> tuple[bool, str]:
    """Validate CNPJ and return reason if invalid."""
    return validar_identificador(TipoIdentificador.CNPJ, cnpj)


# === Formatting ===


def mask_identifier(kind: KindLike, valor: str) -> str:
    """
    Format an identifier in its canonical punctuated form.

    Args:
        kind: Identifier kind (CPF or CNPJ)
        valor: String holding exactly the kind's number of digits

    Returns:
        "XXX.XXX.XXX-XX" for CPF, "XX.XXX.XXX/XXXX-XX" for CNPJ

    Raises:
        IdentifierLengthError: If the digit count is wrong
    """
    descritor = get_kind(kind)
    digitos = unmask_identifier(valor)
    if len(digitos) != descritor.comprimento:
        raise IdentifierLengthError(descritor.nome, descritor.comprimento, len(digitos))

    partes = []
    inicio = 0
    for tamanho in descritor.grupos:
        partes.append(digitos[inicio : inicio + tamanho])
        inicio += tamanho

    formatado = partes[0]
    for separador, parte in zip(descritor.separadores, partes[1:]):
        formatado += separador + parte
    return formatado


def mask_cpf(cpf: str) -> str:
    """Format CPF as XXX.XXX.XXX-XX."""
    return mask_identifier(TipoIdentificador.CPF, cpf)


def mask_cnpj(cnpj: str) -> str:
    """Format CNPJ as XX.XXX.XXX/XXXX-XX."""
    return mask_identifier(TipoIdentificador.CNPJ, cnpj)


unmask_cpf = unmask_identifier
unmask_cnpj = unmask_identifier


# === Generation ===


def generate_valid_identifier(
    kind: KindLike,
    rng: Optional[random.Random] = None,
    formatado: bool = False,
) -> str:
    """Generate a structurally valid (synthetic) identifier.

    Draws ``comprimento - 2`` random digits and appends both check digits.
    The result passes validation but is not tied to any real person or
    company.

    Args:
        kind: Identifier kind (CPF or CNPJ)
        rng: Random source; pass ``random.Random(seed)`` for reproducible
            output. A fresh generator is created when omitted.
        formatado: Return the punctuated form instead of digits only

    Returns:
        Generated identifier
    """
    descritor = get_kind(kind)
    if rng is None:
        rng = random.Random()

    while True:
        base = "".join(str(rng.randrange(10)) for _ in range(descritor.tamanho_base))
        # All-equal bases can never validate, draw again
        if base != base[0] * descritor.tamanho_base:
            break

    digitos = base + calcular_digitos_verificadores(base, descritor)
    logger.debug("%s sintético gerado: %s", descritor.nome, digitos)

    return mask_identifier(descritor, digitos) if formatado else digitos


def generate_cpf(rng: Optional[random.Random] = None, formatado: bool = False) -> str:
    """Generate a valid synthetic CPF."""
    return generate_valid_identifier(TipoIdentificador.CPF, rng, formatado)


def generate_cnpj(rng: Optional[random.Random] = None, formatado: bool = False) -> str:
    """Generate a valid synthetic CNPJ."""
    return generate_valid_identifier(TipoIdentificador.CNPJ, rng, formatado)


# === Format recognition ===


@lru_cache(maxsize=None)
def _padroes_formato(descritor: IdentifierKind) -> tuple[re.Pattern[str], ...]:
    """Build (canonical, digits-only, typing prefix) patterns for a kind."""
    grupos = descritor.grupos
    separadores = [re.escape(s) for s in descritor.separadores]

    canonico = f"[0-9]{{{grupos[0]}}}" + "".join(
        f"{sep}[0-9]{{{g}}}" for sep, g in zip(separadores, grupos[1:])
    )
    somente_digitos = f"[0-9]{{{descritor.comprimento}}}"
    # Each group may be partially typed; later groups only after their separator
    parcial = f"[0-9]{{0,{grupos[0]}}}" + "".join(
        f"(?:{sep}[0-9]{{0,{g}}})?" for sep, g in zip(separadores, grupos[1:])
    )

    return tuple(re.compile(p) for p in (canonico, somente_digitos, parcial))


def is_recognized_format(kind: KindLike, valor: str) -> bool:
    """Check whether a string looks like a (possibly partially typed) identifier.

    Accepts the full punctuated form, the raw digit form, or any prefix of
    the punctuated form as typed in an input mask. Does not check the check
    digits.
    """
    descritor = get_kind(kind)
    if not isinstance(valor, str):
        return False
    return any(p.fullmatch(valor) for p in _padroes_formato(descritor))
