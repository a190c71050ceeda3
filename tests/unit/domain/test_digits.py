"""
Tests para nuban.domain.shared.digits
"""

from nuban.domain.shared.digits import is_digit_string, to_digits


class TestIsDigitString:
    """Pruebas para is_digit_string."""

    def test_digitos_ascii(self):
        assert is_digit_string("0152792740") is True

    def test_con_longitud_correcta(self):
        assert is_digit_string("058", 3) is True

    def test_con_longitud_incorrecta(self):
        assert is_digit_string("05", 3) is False
        assert is_digit_string("0580", 3) is False

    def test_vacio(self):
        assert is_digit_string("") is False

    def test_con_letras(self):
        assert is_digit_string("05A", 3) is False

    def test_con_espacios(self):
        assert is_digit_string(" 058", 4) is False

    def test_con_signo(self):
        assert is_digit_string("-58", 3) is False

    def test_superindice_no_es_digito(self):
        """'²'.isdigit() es True, pero no es un dígito ASCII."""
        assert is_digit_string("05²", 3) is False

    def test_digitos_arabe_indicos(self):
        assert is_digit_string("٠٥٨", 3) is False

    def test_digitos_de_ancho_completo(self):
        assert is_digit_string("０５８", 3) is False

    def test_entero_no_es_string(self):
        assert is_digit_string(58) is False

    def test_none(self):
        assert is_digit_string(None) is False


class TestToDigits:
    """Pruebas para to_digits."""

    def test_conserva_ceros(self):
        assert to_digits("058") == [0, 5, 8]

    def test_todos_los_digitos(self):
        assert to_digits("0123456789") == list(range(10))
