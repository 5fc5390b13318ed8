"""Domain services for BR Validators."""

from br_validators.core.services.registration_check import (
    RegistrationChecker,
    verificar_cadastro,
)

__all__ = [
    "RegistrationChecker",
    "verificar_cadastro",
]
