"""Fixed constants for identifier, email and password validation.

Check digit weights follow the Receita Federal modulo 11 scheme:
- CPF: 10..2 for the 1st digit, 11..2 for the 2nd
- CNPJ: 5,4,3,2,9,8,7,6,5,4,3,2 for the 1st digit, 6,5,4,3,2,9,8,7,6,5,4,3,2 for the 2nd
"""

from br_validators.core.models.enums import TipoIdentificador
from br_validators.core.models.identifier import IdentifierKind

# === Check digit (modulo 11) ===

MODULO = 11
# Remainders below this value produce check digit 0
RESTO_MINIMO = 2

# === Identifier kinds ===

CPF = IdentifierKind(
    nome="CPF",
    comprimento=11,
    pesos_primeiro_digito=(10, 9, 8, 7, 6, 5, 4, 3, 2),
    pesos_segundo_digito=(11, 10, 9, 8, 7, 6, 5, 4, 3, 2),
    grupos=(3, 3, 3, 2),  # XXX.XXX.XXX-XX
    separadores=(".", ".", "-"),
)

CNPJ = IdentifierKind(
    nome="CNPJ",
    comprimento=14,
    pesos_primeiro_digito=(5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    pesos_segundo_digito=(6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    grupos=(2, 3, 3, 4, 2),  # XX.XXX.XXX/XXXX-XX
    separadores=(".", ".", "/", "-"),
)

IDENTIFICADORES: dict[TipoIdentificador, IdentifierKind] = {
    TipoIdentificador.CPF: CPF,
    TipoIdentificador.CNPJ: CNPJ,
}

# === Email (RFC 5321 limits) ===

EMAIL_LOCAL_MAX = 64
EMAIL_DOMINIO_MAX = 253

# === Password policy ===

SENHA_MIN = 8
SENHA_MAX = 128
SENHA_CARACTERES_ESPECIAIS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"
# Matched case-insensitively
SENHA_SEQUENCIAS_PROIBIDAS = ("123", "abc", "qwe", "asd", "zxc")
# Same character this many times in a row is rejected
SENHA_REPETICAO_MAXIMA = 3
