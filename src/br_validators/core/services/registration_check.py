"""Registration check: validates email, password and CNPJ together."""

import logging
from typing import Optional

from br_validators.config import settings
from br_validators.core.models.enums import TipoIdentificador
from br_validators.core.models.registration import (
    DadosProcessados,
    ResultadoCadastro,
    ValidacaoCampos,
)
from br_validators.shared.email import (
    extract_domain,
    is_from_domain,
    normalize_email,
    validate_email,
)
from br_validators.shared.password import validate_password
from br_validators.shared.validators import (
    is_recognized_format,
    mask_cnpj,
    unmask_cnpj,
    validate_cnpj,
)

logger = logging.getLogger(__name__)


class RegistrationChecker:
    """Validates a company user registration and derives display values.

    Invalid input is reported in the result, never raised. Only an absent
    password raises (InvalidArgumentError), as in validate_password.
    """

    def __init__(self, dominio_empresa: Optional[str] = None):
        self.dominio_empresa = dominio_empresa or settings.dominio_empresa

    def check(self, email: str, senha: str, cnpj: str) -> ResultadoCadastro:
        """Run all validations and, if they pass, process the data."""
        validacao = ValidacaoCampos(
            email=validate_email(email),
            senha=validate_password(senha),
            cnpj=validate_cnpj(cnpj),
        )

        if not validacao.todos_validos:
            logger.warning(
                "Dados inválidos detectados (email=%s, senha=%s, cnpj=%s)",
                validacao.email,
                validacao.senha,
                validacao.cnpj,
            )
            return ResultadoCadastro(
                sucesso=False,
                mensagem="Dados inválidos",
                validacao=validacao,
            )

        dados = self._process(email, cnpj)
        logger.info("Cadastro verificado para o domínio %s", dados.dominio)
        return ResultadoCadastro(
            sucesso=True,
            mensagem="Cadastro válido",
            validacao=validacao,
            dados=dados,
        )

    def _process(self, email: str, cnpj: str) -> DadosProcessados:
        email_normalizado = normalize_email(email)
        cnpj_formatado = mask_cnpj(cnpj)
        return DadosProcessados(
            email_normalizado=email_normalizado,
            dominio=extract_domain(email_normalizado),
            dominio_empresa=self.dominio_empresa,
            pertence_dominio_empresa=is_from_domain(email_normalizado, self.dominio_empresa),
            cnpj_formatado=cnpj_formatado,
            cnpj_digitos=unmask_cnpj(cnpj_formatado),
            cnpj_formato_reconhecido=is_recognized_format(
                TipoIdentificador.CNPJ, cnpj_formatado
            ),
        )


def verificar_cadastro(
    email: str,
    senha: str,
    cnpj: str,
    dominio: Optional[str] = None,
) -> ResultadoCadastro:
    """Check a registration (email, password, CNPJ)."""
    checker = RegistrationChecker(dominio)
    return checker.check(email, senha, cnpj)
