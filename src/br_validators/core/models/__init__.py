"""Domain models for identifier, email and password validation."""

from br_validators.core.models.enums import RegraSenha, TipoIdentificador
from br_validators.core.models.identifier import IdentifierKind
from br_validators.core.models.password import RelatorioSenha, ViolacaoSenha
from br_validators.core.models.registration import (
    DadosProcessados,
    ResultadoCadastro,
    ValidacaoCampos,
)

__all__ = [
    "DadosProcessados",
    "IdentifierKind",
    "RegraSenha",
    "RelatorioSenha",
    "ResultadoCadastro",
    "TipoIdentificador",
    "ValidacaoCampos",
    "ViolacaoSenha",
]
