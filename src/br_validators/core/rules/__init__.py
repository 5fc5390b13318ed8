"""Fixed rules and thresholds for validation."""

from br_validators.core.rules.policy_constants import (
    CNPJ,
    CPF,
    EMAIL_DOMINIO_MAX,
    EMAIL_LOCAL_MAX,
    IDENTIFICADORES,
    MODULO,
    RESTO_MINIMO,
    SENHA_CARACTERES_ESPECIAIS,
    SENHA_MAX,
    SENHA_MIN,
    SENHA_REPETICAO_MAXIMA,
    SENHA_SEQUENCIAS_PROIBIDAS,
)

__all__ = [
    "CNPJ",
    "CPF",
    "EMAIL_DOMINIO_MAX",
    "EMAIL_LOCAL_MAX",
    "IDENTIFICADORES",
    "MODULO",
    "RESTO_MINIMO",
    "SENHA_CARACTERES_ESPECIAIS",
    "SENHA_MAX",
    "SENHA_MIN",
    "SENHA_REPETICAO_MAXIMA",
    "SENHA_SEQUENCIAS_PROIBIDAS",
]
