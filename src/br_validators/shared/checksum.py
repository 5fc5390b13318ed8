"""Modulo 11 check digit calculation shared by CPF and CNPJ."""

from collections.abc import Sequence

from br_validators.core.models.identifier import IdentifierKind
from br_validators.core.rules.policy_constants import MODULO, RESTO_MINIMO


def calcular_digito_verificador(digitos: str, pesos: Sequence[int]) -> int:
    """Calculate a single modulo 11 check digit.

    soma = Σ digito[i] * peso[i]
    resto = soma % 11
    digito = 0 if resto < 2 else 11 - resto

    Args:
        digitos: Digit string, one digit per weight
        pesos: Weight table

    Returns:
        Check digit (0-9)

    Raises:
        ValueError: If digits and weights differ in length
    """
    if len(digitos) != len(pesos):
        raise ValueError(
            f"Esperados {len(pesos)} dígitos para a tabela de pesos, recebidos {len(digitos)}"
        )

    soma = sum(int(d) * p for d, p in zip(digitos, pesos))
    resto = soma % MODULO
    return 0 if resto < RESTO_MINIMO else MODULO - resto


def calcular_digitos_verificadores(base: str, kind: IdentifierKind) -> str:
    """Calculate both check digits for an identifier base.

    The second digit is computed over the base plus the first digit.

    Args:
        base: The first ``comprimento - 2`` digits
        kind: Identifier kind providing the weight tables

    Returns:
        Two-character string with the check digit pair
    """
    primeiro = calcular_digito_verificador(base, kind.pesos_primeiro_digito)
    segundo = calcular_digito_verificador(f"{base}{primeiro}", kind.pesos_segundo_digito)
    return f"{primeiro}{segundo}"
