"""Custom exceptions for BR Validators."""


class BRValidatorsError(Exception):
    """Base exception for all BR Validators errors."""

    pass


class ValidationError(BRValidatorsError):
    """Input cannot be processed as requested."""

    pass


class IdentifierLengthError(ValidationError, ValueError):
    """Identifier does not have the number of digits its kind requires."""

    def __init__(self, nome: str, esperado: int, obtido: int):
        self.nome = nome
        self.esperado = esperado
        self.obtido = obtido
        super().__init__(f"{nome} deve ter {esperado} dígitos, tem {obtido}")


class InvalidArgumentError(BRValidatorsError, TypeError):
    """Required argument is absent or of the wrong type."""

    pass


class UnknownIdentifierKindError(BRValidatorsError, ValueError):
    """Identifier kind name is not supported."""

    pass
