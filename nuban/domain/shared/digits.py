"""
Utilidades para strings de dígitos de ancho fijo.

CONTEXTO DEL PROBLEMA:
Los códigos de banco y los números de cuenta NUBAN son identificadores
de ancho fijo con ceros a la izquierda ("058", "0152792740"). No son
magnitudes: convertirlos a int pierde los ceros y rompe el cálculo del
dígito verificador.

Además, str.isdigit() acepta dígitos que no son ASCII ("²", "٣"), por lo
que no sirve para validar. Aquí solo se aceptan los caracteres '0'-'9'.
"""

ASCII_DIGITS = frozenset("0123456789")


def is_digit_string(value: object, length: int | None = None) -> bool:
    """Indica si `value` es un str formado solo por dígitos ASCII.

    Args:
        value: Valor a revisar. Cualquier cosa que no sea str devuelve False.
        length: Si se indica, el string además debe tener exactamente
                esa longitud.

    Ejemplos:
        >>> is_digit_string("058", 3)
        True
        >>> is_digit_string("05", 3)
        False
        >>> is_digit_string("²58")
        False
        >>> is_digit_string(58)
        False
    """
    if not isinstance(value, str) or not value:
        return False
    if length is not None and len(value) != length:
        return False
    return all(char in ASCII_DIGITS for char in value)


def to_digits(value: str) -> list[int]:
    """Convierte un string de dígitos ASCII a la lista de sus valores.

    No valida: se asume que `value` ya pasó por is_digit_string().

    Ejemplos:
        >>> to_digits("058")
        [0, 5, 8]
    """
    return [ord(char) - ord("0") for char in value]
