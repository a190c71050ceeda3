"""
Algoritmo del dígito verificador NUBAN.

Definido por el Banco Central de Nigeria (CBN). No es una decisión de
diseño: debe coincidir exactamente con el regulador.

1. Se forma una secuencia de 12 dígitos: los 3 del código de banco
   seguidos de los primeros 9 del número de cuenta (el "serial").
2. Cada dígito se multiplica por su peso: 3, 7, 3, 3, 7, 3, 3, 7, 3, 3, 7, 3.
3. Se suman los 12 productos.
4. Dígito verificador = (10 - suma % 10) % 10.

Ejemplo con Guaranty Trust Bank ("058") y serial "015279274":

    dígitos: 0  5  8  0  1  5  2  7  9  2  7  4
    pesos:   3  7  3  3  7  3  3  7  3  3  7  3
    suma = 230 → 230 % 10 = 0 → (10 - 0) % 10 = 0

Estas funciones NO validan su entrada. Quien las llama debe asegurar
que recibe strings de dígitos ASCII de la longitud correcta.
"""

from nuban.domain.shared.digits import to_digits

BANK_CODE_LENGTH = 3
SERIAL_LENGTH = 9
ACCOUNT_NUMBER_LENGTH = 10

WEIGHTS: tuple[int, ...] = (3, 7, 3, 3, 7, 3, 3, 7, 3, 3, 7, 3)


def weighted_sum(digits: str) -> int:
    """Suma ponderada de los 12 dígitos (código de banco + serial).

    Ejemplos:
        >>> weighted_sum("058015279274")
        230
    """
    return sum(digit * weight for digit, weight in zip(to_digits(digits), WEIGHTS))


def check_digit_from_sum(checksum: int) -> int:
    """Convierte la suma ponderada en el dígito verificador (0-9).

    Cuando la suma es múltiplo de 10, 10 - 0 = 10 y el módulo final lo
    lleva a 0.
    """
    return (10 - checksum % 10) % 10


def calculate_check_digit(bank_code: str, serial_number: str) -> int:
    """Calcula el dígito verificador para un código de banco y un serial.

    Args:
        bank_code: 3 dígitos ASCII.
        serial_number: Los primeros 9 dígitos del número de cuenta.

    Returns:
        Entero entre 0 y 9.

    Ejemplos:
        >>> calculate_check_digit("058", "015279274")
        0
        >>> calculate_check_digit("058", "098273662")
        4
    """
    return check_digit_from_sum(weighted_sum(bank_code + serial_number))
