"""Main Typer application for BR Validators."""

import logging
import random
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from br_validators import __version__
from br_validators.cli.console import (
    configure_logging,
    console,
    format_flag,
    print_error,
    print_success,
)
from br_validators.config import settings
from br_validators.core.models import TipoIdentificador
from br_validators.core.services import verificar_cadastro
from br_validators.shared import (
    criterios_senha,
    extract_domain,
    extract_local_part,
    generate_valid_identifier,
    is_from_domain,
    is_recognized_format,
    mask_identifier,
    normalize_email,
    unmask_identifier,
    validar_identificador,
    validate_email,
    verificar_senha,
)
from br_validators.shared.exceptions import BRValidatorsError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="br-validators",
    help="Validação de CPF, CNPJ, email e política de senhas",
    add_completion=True,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"BR Validators v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Mostra logs de depuração"),
    ] = False,
) -> None:
    """BR Validators - CPF, CNPJ, email e senha."""
    configure_logging("DEBUG" if verbose else settings.log_level)


@app.command()
def validar(
    tipo: Annotated[TipoIdentificador, typer.Argument(help="cpf ou cnpj")],
    valor: Annotated[str, typer.Argument(help="Número, com ou sem pontuação")],
) -> None:
    """Valida os dígitos verificadores de um CPF ou CNPJ."""
    valido, motivo = validar_identificador(tipo, valor)
    nome = tipo.value.upper()

    if valido:
        print_success(f"{nome} válido: {mask_identifier(tipo, valor)}")
        return

    print_error(f"{nome} inválido: {escape(motivo)}")
    raise typer.Exit(1)


@app.command()
def formatar(
    tipo: Annotated[TipoIdentificador, typer.Argument(help="cpf ou cnpj")],
    valor: Annotated[str, typer.Argument(help="Número com a quantidade exata de dígitos")],
) -> None:
    """Aplica a máscara de exibição (XXX.XXX.XXX-XX / XX.XXX.XXX/XXXX-XX)."""
    try:
        console.print(mask_identifier(tipo, valor), highlight=False)
    except BRValidatorsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)


@app.command()
def limpar(
    valor: Annotated[str, typer.Argument(help="Texto com pontuação")],
) -> None:
    """Remove tudo que não for dígito."""
    console.print(unmask_identifier(valor), highlight=False)


@app.command()
def gerar(
    tipo: Annotated[TipoIdentificador, typer.Argument(help="cpf ou cnpj")],
    quantidade: Annotated[
        int,
        typer.Option("--quantidade", "-n", min=1, help="Quantos números gerar"),
    ] = 1,
    seed: Annotated[
        Optional[int],
        typer.Option("--seed", help="Semente para resultados reproduzíveis"),
    ] = None,
    formatado: Annotated[
        bool,
        typer.Option("--formatado", "-f", help="Gera com pontuação"),
    ] = False,
) -> None:
    """Gera números sintéticos válidos (apenas para testes)."""
    logger.debug("Gerando %d %s (seed=%s)", quantidade, tipo.value.upper(), seed)
    rng = random.Random(seed)
    for _ in range(quantidade):
        console.print(generate_valid_identifier(tipo, rng, formatado), highlight=False)


@app.command()
def formato(
    tipo: Annotated[TipoIdentificador, typer.Argument(help="cpf ou cnpj")],
    valor: Annotated[str, typer.Argument(help="Texto digitado (completo ou parcial)")],
) -> None:
    """Verifica se o texto segue o formato (não valida dígitos verificadores)."""
    nome = tipo.value.upper()
    if is_recognized_format(tipo, valor):
        print_success(f"Formato de {nome} reconhecido")
        return

    print_error(f"Formato de {nome} não reconhecido")
    raise typer.Exit(1)


@app.command()
def email(
    endereco: Annotated[str, typer.Argument(help="Endereço de email")],
    dominio: Annotated[
        Optional[str],
        typer.Option("--dominio", "-d", help="Domínio a verificar (aceita subdomínios)"),
    ] = None,
) -> None:
    """Valida um email e mostra suas partes."""
    normalizado = normalize_email(endereco)

    if not validate_email(normalizado):
        print_error(f"Email inválido: {escape(endereco)}")
        raise typer.Exit(1)

    table = Table(show_header=False)
    table.add_column("Campo", style="header")
    table.add_column("Valor")
    table.add_row("Normalizado", escape(normalizado))
    table.add_row("Usuário", escape(extract_local_part(normalizado) or "-"))
    table.add_row("Domínio", escape(extract_domain(normalizado) or "-"))
    if dominio:
        table.add_row(
            f"Pertence a {escape(dominio)}", format_flag(is_from_domain(normalizado, dominio))
        )

    console.print(table)


@app.command()
def senha(
    valor: Annotated[
        str,
        typer.Option(
            "--senha",
            prompt="Senha",
            hide_input=True,
            help="Senha a avaliar (pedida sem eco se omitida)",
        ),
    ],
) -> None:
    """Avalia uma senha contra a política de segurança."""
    relatorio = verificar_senha(valor)

    if relatorio.valida:
        print_success("Senha atende à política")
        return

    console.print(
        Panel.fit(
            "\n".join(f"[invalid]-[/invalid] {escape(m)}" for m in relatorio.mensagens),
            title="Senha não atende à política",
            border_style="red",
        )
    )
    console.print(f"[muted]{escape(criterios_senha())}[/muted]")
    raise typer.Exit(1)


@app.command()
def cadastro(
    email_usuario: Annotated[str, typer.Argument(metavar="EMAIL", help="Email do usuário")],
    cnpj: Annotated[str, typer.Argument(help="CNPJ da empresa")],
    valor_senha: Annotated[
        str,
        typer.Option("--senha", prompt="Senha", hide_input=True, help="Senha do usuário"),
    ],
    dominio: Annotated[
        Optional[str],
        typer.Option("--dominio", "-d", help="Domínio da empresa"),
    ] = None,
) -> None:
    """Verifica email, senha e CNPJ de um cadastro."""
    resultado = verificar_cadastro(email_usuario, valor_senha, cnpj, dominio)

    table = Table(show_header=True, header_style="bold", title="Validação")
    table.add_column("Campo", style="cyan")
    table.add_column("Válido", justify="center")
    table.add_row("Email", format_flag(resultado.validacao.email))
    table.add_row("Senha", format_flag(resultado.validacao.senha))
    table.add_row("CNPJ", format_flag(resultado.validacao.cnpj))
    console.print(table)

    if not resultado.sucesso or resultado.dados is None:
        print_error(resultado.mensagem)
        raise typer.Exit(1)

    dados = resultado.dados
    console.print(
        Panel.fit(
            f"[header]Email:[/header] {escape(dados.email_normalizado)}\n"
            f"[header]Domínio:[/header] {escape(dados.dominio or '-')}\n"
            f"[header]Domínio da empresa ({escape(dados.dominio_empresa)}):[/header] "
            f"{format_flag(dados.pertence_dominio_empresa)}\n"
            f"[header]CNPJ:[/header] {dados.cnpj_formatado}",
            title=resultado.mensagem,
            border_style="green",
        )
    )


if __name__ == "__main__":
    app()
