"""Enumerations for validator domain models."""

from enum import Enum


class TipoIdentificador(str, Enum):
    """Brazilian taxpayer identifier kinds."""

    CPF = "cpf"
    CNPJ = "cnpj"


class RegraSenha(str, Enum):
    """Password policy rules that can be violated."""

    COMPRIMENTO_MINIMO = "comprimento_minimo"
    COMPRIMENTO_MAXIMO = "comprimento_maximo"
    MAIUSCULA = "maiuscula"
    MINUSCULA = "minuscula"
    NUMERO = "numero"
    CARACTERE_ESPECIAL = "caractere_especial"
    SEQUENCIA = "sequencia"
    REPETICAO = "repeticao"
