"""
Utilidades compartidas del dominio.

Funciones puras que no dependen de ninguna librería externa ni del
registro de bancos. Solo operan sobre strings de dígitos.

Uso:
    from nuban.domain.shared.digits import is_digit_string
    from nuban.domain.shared.checksum import calculate_check_digit, weighted_sum
"""
