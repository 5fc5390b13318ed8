"""Password policy report models."""

from pydantic import BaseModel, Field

from br_validators.core.models.enums import RegraSenha


class ViolacaoSenha(BaseModel):
    """A single password policy rule that was not satisfied."""

    regra: RegraSenha = Field(..., description="Violated rule")
    mensagem: str = Field(..., description="Human-readable explanation")

    model_config = {"frozen": True}


class RelatorioSenha(BaseModel):
    """Outcome of evaluating a password against the policy.

    Never carries the password itself.
    """

    violacoes: list[ViolacaoSenha] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def valida(self) -> bool:
        """Compliant iff no rule was violated."""
        return not self.violacoes

    @property
    def mensagens(self) -> list[str]:
        """Messages of all violations, in evaluation order."""
        return [v.mensagem for v in self.violacoes]

    def violou(self, regra: RegraSenha) -> bool:
        """Check whether a specific rule was violated."""
        return any(v.regra == regra for v in self.violacoes)
