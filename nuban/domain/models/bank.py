"""
Modelo de dominio: Banco registrado.

Una fila de la tabla de bancos del CBN: código de 3 dígitos y nombre.
"""

from dataclasses import dataclass

from nuban.domain.shared.checksum import BANK_CODE_LENGTH
from nuban.domain.shared.digits import is_digit_string


@dataclass(frozen=True, order=True)
class BankEntry:
    """Banco del registro.

    order=True para poder ordenar por código al listar los bancos.
    """

    code: str
    """Código asignado por el regulador. Siempre 3 dígitos como string
    (ej: '058'), nunca int, porque los ceros iniciales son parte del código."""

    name: str
    """Nombre canónico del banco. Ejemplo: 'Guaranty Trust Bank'."""

    def __post_init__(self) -> None:
        if not is_digit_string(self.code, BANK_CODE_LENGTH):
            raise ValueError(f"Código de banco inválido: '{self.code}'. Debe ser de 3 dígitos")
        if not self.name:
            raise ValueError("El nombre del banco no puede estar vacío")
