"""Tests for CPF/CNPJ validators, formatters, generator and format recognizer."""

import random

import pytest

from br_validators.core.models import IdentifierKind, TipoIdentificador
from br_validators.core.rules import CNPJ, CPF
from br_validators.shared.exceptions import (
    IdentifierLengthError,
    UnknownIdentifierKindError,
)
from br_validators.shared.validators import (
    generate_cnpj,
    generate_cpf,
    generate_valid_identifier,
    get_kind,
    is_recognized_format,
    mask_cnpj,
    mask_cpf,
    mask_identifier,
    unmask_cnpj,
    unmask_cpf,
    unmask_identifier,
    validar_cnpj,
    validar_cpf,
    validate_cnpj,
    validate_cpf,
    validate_identifier,
)


class TestCPFValidation:
    """Tests for CPF validation."""

    def test_valid_cpf(self):
        """Test valid CPF numbers."""
        # Known valid CPFs (generated for testing)
        assert validate_cpf("52998224725") is True
        assert validate_cpf("529.982.247-25") is True
        assert validate_cpf("111.444.777-35") is True
        assert validate_cpf("123.456.789-09") is True

    def test_invalid_cpf_all_same_digits(self):
        """Test that CPFs with all same digits are invalid."""
        assert validate_cpf("11111111111") is False
        assert validate_cpf("00000000000") is False
        assert validate_cpf("999.999.999-99") is False

    def test_invalid_cpf_wrong_length(self):
        """Test CPFs with wrong length."""
        assert validate_cpf("1234567890") is False
        assert validate_cpf("123456789012") is False
        assert validate_cpf("") is False
        assert validate_cpf("0000000000") is False

    def test_invalid_cpf_wrong_check_digits(self):
        """Test CPFs with wrong check digits."""
        assert validate_cpf("52998224726") is False
        assert validate_cpf("52998224724") is False

    def test_non_string_is_invalid(self):
        """Non-string input is invalid, not an error."""
        assert validate_cpf(None) is False
        assert validate_cpf(52998224725) is False

    def test_non_ascii_digits_are_stripped(self):
        """Only ASCII digits count."""
        assert validate_cpf("５２９９８２２４７２５") is False


class TestCNPJValidation:
    """Tests for CNPJ validation."""

    def test_valid_cnpj(self):
        """Test valid CNPJ numbers."""
        assert validate_cnpj("11222333000181") is True
        assert validate_cnpj("11.222.333/0001-81") is True

    def test_invalid_cnpj_all_same_digits(self):
        """Test that CNPJs with all same digits are invalid."""
        assert validate_cnpj("11111111111111") is False
        assert validate_cnpj("00000000000000") is False

    def test_invalid_cnpj_wrong_length(self):
        """Test CNPJs with wrong length."""
        assert validate_cnpj("1122233300018") is False
        assert validate_cnpj("112223330001811") is False

    def test_invalid_cnpj_wrong_final_digit(self):
        assert validate_cnpj("11222333000180") is False


class TestValidateIdentifier:
    """Tests for the generic entry point."""

    @pytest.mark.parametrize(
        "kind",
        [TipoIdentificador.CPF, "cpf", "CPF", " Cpf ", CPF],
    )
    def test_accepts_kind_forms(self, kind):
        assert validate_identifier(kind, "52998224725") is True

    def test_unknown_kind_raises(self):
        with pytest.raises(UnknownIdentifierKindError, match="rg"):
            validate_identifier("rg", "123")

    def test_get_kind(self):
        assert get_kind("cnpj") is CNPJ
        assert get_kind(TipoIdentificador.CPF) is CPF

    def test_length_is_per_kind(self):
        """A valid CPF is not a valid CNPJ."""
        assert validate_identifier(TipoIdentificador.CNPJ, "52998224725") is False


class TestIdentifierKind:
    """Tests for the kind descriptor."""

    def test_weight_table_length_checked(self):
        with pytest.raises(ValueError, match="primeiro dígito"):
            IdentifierKind(
                nome="X",
                comprimento=5,
                pesos_primeiro_digito=(2, 3),
                pesos_segundo_digito=(4, 3, 2, 1),
                grupos=(5,),
                separadores=(),
            )

    def test_mask_layout_checked(self):
        with pytest.raises(ValueError, match="grupos"):
            IdentifierKind(
                nome="X",
                comprimento=5,
                pesos_primeiro_digito=(4, 3, 2),
                pesos_segundo_digito=(5, 4, 3, 2),
                grupos=(2, 2),
                separadores=("-",),
            )

    def test_custom_kind_works_end_to_end(self):
        """The engine is driven only by the descriptor."""
        kind = IdentifierKind(
            nome="TESTE",
            comprimento=6,
            pesos_primeiro_digito=(5, 4, 3, 2),
            pesos_segundo_digito=(6, 5, 4, 3, 2),
            grupos=(4, 2),
            separadores=("-",),
        )
        numero = generate_valid_identifier(kind, random.Random(1))
        assert len(numero) == 6
        assert validate_identifier(kind, numero) is True
        assert mask_identifier(kind, numero) == f"{numero[:4]}-{numero[4:]}"

    def test_kind_is_frozen(self):
        with pytest.raises(Exception):
            CPF.comprimento = 12


class TestFormatters:
    """Tests for mask/unmask."""

    def test_mask_cpf(self):
        """Test CPF formatting."""
        assert mask_cpf("52998224725") == "529.982.247-25"
        assert mask_cpf("529.982.247-25") == "529.982.247-25"

    def test_mask_cnpj(self):
        """Test CNPJ formatting."""
        assert mask_cnpj("11222333000181") == "11.222.333/0001-81"

    def test_mask_does_not_check_digits(self):
        """Masking only needs the right length."""
        assert mask_cpf("11111111111") == "111.111.111-11"

    def test_mask_wrong_length_raises(self):
        """Wrong length is a caller error, not a False."""
        with pytest.raises(IdentifierLengthError, match="CPF deve ter 11 dígitos, tem 9") as exc:
            mask_cpf("529982247")
        assert exc.value.esperado == 11
        assert exc.value.obtido == 9

    def test_mask_error_is_value_error(self):
        with pytest.raises(ValueError, match="14 dígitos"):
            mask_cnpj("11.222.333/0001")

    def test_unmask(self):
        assert unmask_cpf("529.982.247-25") == "52998224725"
        assert unmask_cnpj("11.222.333/0001-81") == "11222333000181"
        assert unmask_identifier("abc") == ""
        assert unmask_identifier("1-2-3") == "123"

    @pytest.mark.parametrize("kind", list(TipoIdentificador))
    def test_unmask_inverts_mask(self, kind, rng):
        for _ in range(20):
            digitos = generate_valid_identifier(kind, rng)
            assert unmask_identifier(mask_identifier(kind, digitos)) == digitos


class TestGenerator:
    """Tests for synthetic identifier generation."""

    @pytest.mark.parametrize("kind", list(TipoIdentificador))
    def test_generated_identifiers_validate(self, kind, rng):
        for _ in range(200):
            assert validate_identifier(kind, generate_valid_identifier(kind, rng)) is True

    def test_lengths(self, rng):
        assert len(generate_cpf(rng)) == 11
        assert len(generate_cnpj(rng)) == 14
        assert generate_cpf(rng).isdigit()

    def test_seeded_generation_is_reproducible(self):
        assert generate_cnpj(random.Random(99)) == generate_cnpj(random.Random(99))

    def test_formatted_output(self, rng):
        numero = generate_cpf(rng, formatado=True)
        assert is_recognized_format(TipoIdentificador.CPF, numero)
        assert len(numero) == 14
        assert validate_cpf(numero) is True

    def test_default_source(self):
        assert validate_cnpj(generate_cnpj()) is True

    def test_degenerate_base_is_redrawn(self):
        """A source that first yields all zeros must not produce 000...0."""

        class FakeRandom:
            def __init__(self):
                self.calls = 0

            def randrange(self, stop):
                self.calls += 1
                return 0 if self.calls <= 9 else self.calls % 10

        numero = generate_cpf(FakeRandom())
        assert numero != "00000000000"
        assert validate_cpf(numero) is True


class TestFormatRecognizer:
    """Tests for is_recognized_format."""

    @pytest.mark.parametrize(
        "valor",
        ["529.982.247-25", "52998224725", "529", "529.", "529.982", "529.982.247-2", ""],
    )
    def test_cpf_recognized(self, valor):
        assert is_recognized_format(TipoIdentificador.CPF, valor) is True

    @pytest.mark.parametrize(
        "valor",
        ["5299", "529-982", "529.982.247-255", "abc", "52998224725\n", "529 982 247 25"],
    )
    def test_cpf_not_recognized(self, valor):
        assert is_recognized_format(TipoIdentificador.CPF, valor) is False

    @pytest.mark.parametrize(
        "valor",
        ["11.222.333/0001-81", "11222333000181", "11.222.333/0001", "11.2"],
    )
    def test_cnpj_recognized(self, valor):
        assert is_recognized_format(TipoIdentificador.CNPJ, valor) is True

    def test_cnpj_wrong_separator(self):
        assert is_recognized_format(TipoIdentificador.CNPJ, "11.222.333-0001") is False

    def test_does_not_imply_valid_checksum(self):
        assert is_recognized_format(TipoIdentificador.CPF, "111.111.111-11") is True
        assert validate_cpf("111.111.111-11") is False

    def test_non_string(self):
        assert is_recognized_format(TipoIdentificador.CPF, None) is False


class TestValidarCPF:
    """Tests for validar_cpf function (returns tuple with reason)."""

    def test_valid_cpf_returns_true(self):
        """Valid CPF should return (True, '')."""
        valido, motivo = validar_cpf("52998224725")
        assert valido is True
        assert motivo == ""

    def test_valid_cpf_with_formatting(self):
        """Valid CPF with formatting should return (True, '')."""
        valido, motivo = validar_cpf("529.982.247-25")
        assert valido is True
        assert motivo == ""

    def test_invalid_cpf_wrong_length(self):
        """CPF with wrong length should return reason."""
        valido, motivo = validar_cpf("123")
        assert valido is False
        assert "11 dígitos" in motivo
        assert "3" in motivo

    def test_invalid_cpf_all_same_digits(self):
        """CPF with all same digits should return reason."""
        valido, motivo = validar_cpf("11111111111")
        assert valido is False
        assert "todos dígitos iguais" in motivo

    def test_invalid_cpf_first_digit_wrong(self):
        """CPF with wrong first check digit should return reason."""
        # 529982247X5 - changing position 9
        valido, motivo = validar_cpf("52998224715")
        assert valido is False
        assert "Primeiro dígito verificador" in motivo
        assert "esperado 2" in motivo

    def test_invalid_cpf_second_digit_wrong(self):
        """CPF with wrong second check digit should return reason."""
        # 5299822472X - changing position 10
        valido, motivo = validar_cpf("52998224720")
        assert valido is False
        assert "Segundo dígito verificador" in motivo
        assert "esperado 5" in motivo


class TestValidarCNPJ:
    """Tests for validar_cnpj function (returns tuple with reason)."""

    def test_valid_cnpj_returns_true(self):
        """Valid CNPJ should return (True, '')."""
        valido, motivo = validar_cnpj("11222333000181")
        assert valido is True
        assert motivo == ""

    def test_invalid_cnpj_wrong_length(self):
        """CNPJ with wrong length should return reason."""
        valido, motivo = validar_cnpj("123")
        assert valido is False
        assert "14 dígitos" in motivo

    def test_invalid_cnpj_all_same_digits(self):
        """CNPJ with all same digits should return reason."""
        valido, motivo = validar_cnpj("11111111111111")
        assert valido is False
        assert "todos dígitos iguais" in motivo

    def test_invalid_cnpj_first_digit_wrong(self):
        """CNPJ with wrong first check digit should return reason."""
        valido, motivo = validar_cnpj("11222333000191")
        assert valido is False
        assert "Primeiro dígito verificador" in motivo

    def test_invalid_cnpj_second_digit_wrong(self):
        valido, motivo = validar_cnpj("11222333000180")
        assert valido is False
        assert "Segundo dígito verificador inválido (esperado 1)" in motivo
