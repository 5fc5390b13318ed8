"""BR Validators - CPF/CNPJ check digits, email and password policy validation."""

from br_validators.core.models import TipoIdentificador
from br_validators.shared import (
    extract_domain,
    extract_local_part,
    generate_valid_identifier,
    is_from_domain,
    is_recognized_format,
    mask_identifier,
    normalize_email,
    unmask_identifier,
    validate_email,
    validate_identifier,
    validate_password,
)

__version__ = "0.1.0"

__all__ = [
    "TipoIdentificador",
    "__version__",
    "extract_domain",
    "extract_local_part",
    "generate_valid_identifier",
    "is_from_domain",
    "is_recognized_format",
    "mask_identifier",
    "normalize_email",
    "unmask_identifier",
    "validate_email",
    "validate_identifier",
    "validate_password",
]
