"""
Tests para los modelos de dominio.

Verifican que las validaciones, propiedades derivadas e inmutabilidad
funcionan correctamente. Estos tests son la "especificación ejecutable"
del modelo de datos.
"""

import pytest

from nuban.domain.exceptions import (
    InvalidAccountNumberError,
    InvalidBankCodeError,
)
from nuban.domain.models import BankEntry, Nuban, ValidationResult
from nuban.infrastructure.registry import BankRegistry


class TestBankEntry:
    """Pruebas para el modelo BankEntry."""

    def test_crear_basico(self):
        entry = BankEntry(code="058", name="Guaranty Trust Bank")
        assert entry.code == "058"
        assert entry.name == "Guaranty Trust Bank"

    def test_codigo_corto_lanza_error(self):
        with pytest.raises(ValueError, match="3 dígitos"):
            BankEntry(code="58", name="Guaranty Trust Bank")

    def test_nombre_vacio_lanza_error(self):
        with pytest.raises(ValueError, match="vacío"):
            BankEntry(code="058", name="")

    def test_se_ordena_por_codigo(self):
        entries = [BankEntry("058", "Guaranty Trust Bank"), BankEntry("011", "First Bank")]
        assert [e.code for e in sorted(entries)] == ["011", "058"]

    def test_es_inmutable(self):
        entry = BankEntry(code="058", name="Guaranty Trust Bank")
        with pytest.raises(AttributeError):
            entry.name = "OTRO"  # type: ignore


class TestNuban:
    """Pruebas para el modelo Nuban."""

    def test_crear_valido(self):
        nuban = Nuban("058", "0152792740")
        assert nuban.bank_code == "058"
        assert nuban.account_number == "0152792740"

    def test_check_digit_es_string(self):
        nuban = Nuban("058", "0152792740")
        assert nuban.check_digit == "0"

    def test_serial_number(self):
        assert Nuban("058", "0152792740").serial_number == "015279274"

    def test_bank_name(self):
        assert Nuban("058", "0152792740").bank_name == "Guaranty Trust Bank"

    def test_bank(self):
        assert Nuban("058", "0152792740").bank == BankEntry("058", "Guaranty Trust Bank")

    def test_str_son_13_digitos(self):
        assert str(Nuban("058", "0152792740")) == "0580152792740"

    def test_create_equivale_al_constructor(self):
        assert Nuban.create("058", "0152792740") == Nuban("058", "0152792740")

    def test_verificador_incorrecto_lanza_error(self):
        with pytest.raises(InvalidAccountNumberError, match="esperado 4, recibido 5"):
            Nuban("058", "0982736625")

    def test_banco_desconocido_lanza_error(self):
        with pytest.raises(InvalidBankCodeError, match="no registrado"):
            Nuban("999", "0152792740")

    def test_codigo_corto_lanza_error(self):
        with pytest.raises(InvalidBankCodeError):
            Nuban("05", "0152792740")

    def test_cuenta_corta_lanza_error(self):
        with pytest.raises(InvalidAccountNumberError, match="10 dígitos"):
            Nuban("058", "01527927")

    def test_enteros_no_son_aceptados(self):
        """58 y 152792740 como int perderían los ceros iniciales."""
        with pytest.raises(InvalidBankCodeError):
            Nuban(58, 152792740)  # type: ignore

    def test_es_inmutable(self):
        nuban = Nuban("058", "0152792740")
        with pytest.raises(AttributeError):
            nuban.account_number = "0982736625"  # type: ignore

    def test_registro_personalizado(self):
        """Con un registro propio, el código se valida contra ese registro."""
        registry = BankRegistry({"058": "GTBank"})
        nuban = Nuban("058", "0152792740", registry)
        assert nuban.bank_name == "GTBank"
        with pytest.raises(InvalidBankCodeError):
            Nuban("014", "0152792740", registry)

    def test_igualdad_ignora_el_registro(self):
        registry = BankRegistry({"058": "GTBank"})
        assert Nuban("058", "0152792740", registry) == Nuban("058", "0152792740")

    def test_es_hasheable(self):
        assert len({Nuban("058", "0152792740"), Nuban("058", "0152792740")}) == 1


class TestValidationResult:
    """Pruebas para el modelo ValidationResult."""

    def test_exito(self):
        nuban = Nuban("058", "0152792740")
        resultado = ValidationResult.success(nuban)
        assert resultado.is_ok is True
        assert bool(resultado) is True
        assert resultado.error is None
        assert resultado.reason is None
        assert resultado.unwrap() is nuban

    def test_fallo(self):
        error = InvalidBankCodeError("999", reason="unknown_bank")
        resultado = ValidationResult.failure("999", "0152792740", error)
        assert resultado.is_ok is False
        assert bool(resultado) is False
        assert resultado.nuban is None
        assert resultado.reason == "unknown_bank"

    def test_unwrap_de_fallo_lanza_el_error(self):
        error = InvalidBankCodeError("999", reason="unknown_bank")
        resultado = ValidationResult.failure("999", "0152792740", error)
        with pytest.raises(InvalidBankCodeError) as exc_info:
            resultado.unwrap()
        assert exc_info.value is error

    def test_sin_nuban_ni_error_lanza_error(self):
        with pytest.raises(ValueError, match="exactamente uno de nuban o error"):
            ValidationResult(bank_code="058", account_number="0152792740")

    def test_con_ambos_lanza_error(self):
        with pytest.raises(ValueError, match="exactamente uno de nuban o error"):
            ValidationResult(
                bank_code="058",
                account_number="0152792740",
                nuban=Nuban("058", "0152792740"),
                error=InvalidBankCodeError("058"),
            )
