"""Identifier kind descriptor."""

from pydantic import BaseModel, Field, model_validator


class IdentifierKind(BaseModel):
    """Describes a modulo-11 checksum identifier (CPF, CNPJ).

    The two weight tables drive the check digit calculation and the mask
    layout (digit groups joined by separators) drives formatting and
    format recognition.
    """

    nome: str = Field(..., description="Display name (e.g., CPF)")
    comprimento: int = Field(..., gt=2, description="Total digits including check digits")
    pesos_primeiro_digito: tuple[int, ...] = Field(
        ..., description="Weights for the first check digit"
    )
    pesos_segundo_digito: tuple[int, ...] = Field(
        ..., description="Weights for the second check digit"
    )
    grupos: tuple[int, ...] = Field(..., description="Digit group sizes of the mask")
    separadores: tuple[str, ...] = Field(
        ..., description="Punctuation placed between digit groups"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_layout(self) -> "IdentifierKind":
        """Weight tables and mask layout must agree with the length."""
        if len(self.pesos_primeiro_digito) != self.comprimento - 2:
            raise ValueError(
                f"{self.nome}: pesos do primeiro dígito devem ter {self.comprimento - 2} posições"
            )
        if len(self.pesos_segundo_digito) != self.comprimento - 1:
            raise ValueError(
                f"{self.nome}: pesos do segundo dígito devem ter {self.comprimento - 1} posições"
            )
        if sum(self.grupos) != self.comprimento:
            raise ValueError(f"{self.nome}: grupos da máscara devem somar {self.comprimento}")
        if len(self.separadores) != len(self.grupos) - 1:
            raise ValueError(f"{self.nome}: deve haver um separador entre cada grupo")
        return self

    @property
    def tamanho_base(self) -> int:
        """Number of digits before the check digit pair."""
        return self.comprimento - 2
