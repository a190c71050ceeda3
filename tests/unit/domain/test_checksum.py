"""
Tests para nuban.domain.shared.checksum

El algoritmo lo define el CBN, así que los casos concretos vienen de
cuentas reales de Guaranty Trust Bank ("058") y se verifican a mano
en el docstring del módulo.
"""

import pytest

from nuban.domain.shared.checksum import (
    WEIGHTS,
    calculate_check_digit,
    check_digit_from_sum,
    weighted_sum,
)


class TestWeightedSum:
    """Pruebas para la suma ponderada de los 12 dígitos."""

    def test_pesos_del_regulador(self):
        assert WEIGHTS == (3, 7, 3, 3, 7, 3, 3, 7, 3, 3, 7, 3)

    def test_cuenta_gtb(self):
        assert weighted_sum("058015279274") == 230

    def test_todo_ceros(self):
        assert weighted_sum("000000000000") == 0

    def test_todo_nueves(self):
        """9 × (3+7+3) × 4 = 468, la suma máxima posible."""
        assert weighted_sum("999999999999") == 468

    def test_conserva_ceros_iniciales(self):
        """'058' no es 58: el cero ocupa la posición de peso 3."""
        assert weighted_sum("058000000000") == 0 * 3 + 5 * 7 + 8 * 3


class TestCheckDigitFromSum:
    """Pruebas para la conversión suma → dígito verificador."""

    def test_multiplo_de_diez_da_cero(self):
        assert check_digit_from_sum(230) == 0

    def test_resto_seis_da_cuatro(self):
        assert check_digit_from_sum(276) == 4

    @pytest.mark.parametrize("checksum", range(0, 469))
    def test_coincide_con_formulacion_alternativa(self, checksum):
        """(10 - s % 10) % 10 debe ser igual a "si 10 - s % 10 es 10, entonces 0"."""
        alternativo = 10 - (checksum % 10)
        if alternativo == 10:
            alternativo = 0
        assert check_digit_from_sum(checksum) == alternativo

    @pytest.mark.parametrize("checksum", range(0, 469))
    def test_siempre_entre_cero_y_nueve(self, checksum):
        assert 0 <= check_digit_from_sum(checksum) <= 9


class TestCalculateCheckDigit:
    """Pruebas para calculate_check_digit (código de banco + serial)."""

    def test_cuenta_valida_gtb(self):
        assert calculate_check_digit("058", "015279274") == 0

    def test_cuenta_invalida_gtb(self):
        """El verificador correcto de 098273662 es 4, no 5."""
        assert calculate_check_digit("058", "098273662") == 4

    def test_es_determinista(self):
        primero = calculate_check_digit("033", "123456789")
        segundo = calculate_check_digit("033", "123456789")
        assert primero == segundo

    def test_depende_del_banco(self):
        """El mismo serial da verificadores distintos según el banco."""
        assert calculate_check_digit("058", "015279274") != calculate_check_digit(
            "044", "015279274"
        )
