"""Password strength policy.

Rules:
- 8 to 128 characters
- At least one uppercase letter, one lowercase letter, one digit and one symbol
- No keyboard/alphabetic/numeric runs (123, abc, qwe, asd, zxc), any case
- No character repeated 3+ times in a row

Passwords are never stored or logged.
"""

import re

from br_validators.core.models.enums import RegraSenha
from br_validators.core.models.password import RelatorioSenha, ViolacaoSenha
from br_validators.core.rules.policy_constants import (
    SENHA_CARACTERES_ESPECIAIS,
    SENHA_MAX,
    SENHA_MIN,
    SENHA_REPETICAO_MAXIMA,
    SENHA_SEQUENCIAS_PROIBIDAS,
)
from br_validators.shared.exceptions import InvalidArgumentError

_MAIUSCULA = re.compile(r"[A-Z]")
_MINUSCULA = re.compile(r"[a-z]")
_NUMERO = re.compile(r"[0-9]")
_ESPECIAL = re.compile(f"[{re.escape(SENHA_CARACTERES_ESPECIAIS)}]")
_REPETICAO = re.compile(rf"(.)\1{{{SENHA_REPETICAO_MAXIMA - 1},}}", re.DOTALL)


def _violacoes_comprimento(senha: str) -> list[ViolacaoSenha]:
    violacoes = []
    if len(senha) < SENHA_MIN:
        violacoes.append(
            ViolacaoSenha(
                regra=RegraSenha.COMPRIMENTO_MINIMO,
                mensagem=f"Senha deve ter pelo menos {SENHA_MIN} caracteres",
            )
        )
    if len(senha) > SENHA_MAX:
        violacoes.append(
            ViolacaoSenha(
                regra=RegraSenha.COMPRIMENTO_MAXIMO,
                mensagem=f"Senha deve ter no máximo {SENHA_MAX} caracteres",
            )
        )
    return violacoes


def _violacoes_caracteres(senha: str) -> list[ViolacaoSenha]:
    classes = [
        (_MAIUSCULA, RegraSenha.MAIUSCULA, "Senha deve conter pelo menos uma letra maiúscula"),
        (_MINUSCULA, RegraSenha.MINUSCULA, "Senha deve conter pelo menos uma letra minúscula"),
        (_NUMERO, RegraSenha.NUMERO, "Senha deve conter pelo menos um número"),
        (_ESPECIAL, RegraSenha.CARACTERE_ESPECIAL, "Senha deve conter pelo menos um caractere especial"),
    ]
    return [
        ViolacaoSenha(regra=regra, mensagem=mensagem)
        for padrao, regra, mensagem in classes
        if not padrao.search(senha)
    ]


def _violacoes_padroes(senha: str) -> list[ViolacaoSenha]:
    violacoes = []
    minuscula = senha.lower()
    if any(seq in minuscula for seq in SENHA_SEQUENCIAS_PROIBIDAS):
        violacoes.append(
            ViolacaoSenha(
                regra=RegraSenha.SEQUENCIA,
                mensagem="Senha não deve conter sequências",
            )
        )
    if _REPETICAO.search(senha):
        violacoes.append(
            ViolacaoSenha(
                regra=RegraSenha.REPETICAO,
                mensagem="Senha não deve ter caracteres repetidos em excesso",
            )
        )
    return violacoes


def verificar_senha(senha: str) -> RelatorioSenha:
    """Evaluate a password against every policy rule.

    Args:
        senha: Password candidate (empty string is evaluated normally)

    Returns:
        Report listing every violated rule

    Raises:
        InvalidArgumentError: If senha is None or not a string
    """
    if senha is None:
        raise InvalidArgumentError("Senha não pode ser nula")
    if not isinstance(senha, str):
        raise InvalidArgumentError(f"Senha deve ser texto, recebido {type(senha).__name__}")

    return RelatorioSenha(
        violacoes=[
            *_violacoes_comprimento(senha),
            *_violacoes_caracteres(senha),
            *_violacoes_padroes(senha),
        ]
    )


def validate_password(senha: str) -> bool:
    """
    Check a password against the strength policy.

    Args:
        senha: Password candidate

    Returns:
        True if compliant, False otherwise (non-string values are non-compliant)

    Raises:
        InvalidArgumentError: If senha is None
    """
    if senha is None:
        raise InvalidArgumentError("Senha não pode ser nula")
    if not isinstance(senha, str):
        return False
    return verificar_senha(senha).valida


def criterios_senha() -> str:
    """Return the password criteria for display to the user."""
    return (
        "A senha deve conter:\n"
        f"• Entre {SENHA_MIN} e {SENHA_MAX} caracteres\n"
        "• Pelo menos 1 letra maiúscula\n"
        "• Pelo menos 1 letra minúscula\n"
        "• Pelo menos 1 número\n"
        f"• Pelo menos 1 símbolo ({SENHA_CARACTERES_ESPECIAIS})\n"
        f"• Nenhuma sequência ({', '.join(SENHA_SEQUENCIAS_PROIBIDAS)})\n"
        f"• Nenhum caractere repetido {SENHA_REPETICAO_MAXIMA} ou mais vezes seguidas"
    )
