"""Registration check result models."""

from typing import Optional

from pydantic import BaseModel, Field


class ValidacaoCampos(BaseModel):
    """Per-field validity of a registration."""

    email: bool
    senha: bool
    cnpj: bool

    model_config = {"frozen": True}

    @property
    def todos_validos(self) -> bool:
        """True when every field passed validation."""
        return self.email and self.senha and self.cnpj


class DadosProcessados(BaseModel):
    """Derived values for a registration that passed validation."""

    email_normalizado: str = Field(..., description="Trimmed, lowercased email")
    dominio: Optional[str] = Field(default=None, description="Email domain")
    dominio_empresa: str = Field(..., description="Company domain checked against")
    pertence_dominio_empresa: bool = Field(
        default=False, description="Email belongs to the company domain or a subdomain"
    )
    cnpj_formatado: str = Field(..., description="CNPJ in XX.XXX.XXX/XXXX-XX form")
    cnpj_digitos: str = Field(..., description="CNPJ digits only")
    cnpj_formato_reconhecido: bool = Field(
        default=False, description="Masked CNPJ matches a known display format"
    )

    model_config = {"frozen": True}


class ResultadoCadastro(BaseModel):
    """Outcome of a registration check."""

    sucesso: bool
    mensagem: str
    validacao: ValidacaoCampos
    dados: Optional[DadosProcessados] = None

    model_config = {"frozen": True}
