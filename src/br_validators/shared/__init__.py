"""Shared validation utilities for BR Validators."""

from br_validators.shared.checksum import (
    calcular_digito_verificador,
    calcular_digitos_verificadores,
)
from br_validators.shared.email import (
    extract_domain,
    extract_local_part,
    is_from_domain,
    normalize_email,
    validate_email,
)
from br_validators.shared.password import (
    criterios_senha,
    validate_password,
    verificar_senha,
)
from br_validators.shared.validators import (
    generate_cnpj,
    generate_cpf,
    generate_valid_identifier,
    get_kind,
    is_recognized_format,
    mask_cnpj,
    mask_cpf,
    mask_identifier,
    unmask_cnpj,
    unmask_cpf,
    unmask_identifier,
    validar_cnpj,
    validar_cpf,
    validar_identificador,
    validate_cnpj,
    validate_cpf,
    validate_identifier,
)

__all__ = [
    # Checksum
    "calcular_digito_verificador",
    "calcular_digitos_verificadores",
    # Identifiers
    "generate_cnpj",
    "generate_cpf",
    "generate_valid_identifier",
    "get_kind",
    "is_recognized_format",
    "mask_cnpj",
    "mask_cpf",
    "mask_identifier",
    "unmask_cnpj",
    "unmask_cpf",
    "unmask_identifier",
    "validar_cnpj",
    "validar_cpf",
    "validar_identificador",
    "validate_cnpj",
    "validate_cpf",
    "validate_identifier",
    # Email
    "extract_domain",
    "extract_local_part",
    "is_from_domain",
    "normalize_email",
    "validate_email",
    # Password
    "criterios_senha",
    "validate_password",
    "verificar_senha",
]
