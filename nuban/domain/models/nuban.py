"""
Modelo de dominio: NUBAN validado.

Un Nuban es un código de banco de 3 dígitos más un número de cuenta de
10 dígitos cuyo último dígito es el verificador. La única forma de tener
una instancia es pasando todas las validaciones: si existe, es válida.

Decisiones de diseño:
- bank_code y account_number son str, nunca int. "058" y "0152792740"
  como enteros serían 58 y 152792740, y el dígito verificador calculado
  sobre ellos sería otro.
- El orden de las validaciones es fijo y está documentado en
  find_nuban_error(): primero formatos, luego registro, luego dígito
  verificador. Cuando hay varios problemas, se reporta el primero.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nuban.domain.exceptions import (
    REASON_CHECKSUM,
    REASON_UNKNOWN_BANK,
    InvalidAccountNumberError,
    InvalidBankCodeError,
    NubanBaseError,
)
from nuban.domain.models.bank import BankEntry
from nuban.domain.shared.checksum import (
    ACCOUNT_NUMBER_LENGTH,
    BANK_CODE_LENGTH,
    SERIAL_LENGTH,
    calculate_check_digit,
)
from nuban.domain.shared.digits import is_digit_string

if TYPE_CHECKING:
    from nuban.infrastructure.registry import BankRegistry


def find_nuban_error(
    bank_code: object, account_number: object, registry: BankRegistry
) -> NubanBaseError | None:
    """Devuelve el primer error de validación, o None si el par es válido.

    Orden de revisión:
    1. Formato del código de banco (3 dígitos ASCII).
    2. Formato del número de cuenta (10 dígitos ASCII).
    3. Código de banco presente en el registro.
    4. Dígito verificador.

    ¿Por qué devolver el error en lugar de lanzarlo? Porque una cuenta
    inválida es un resultado esperado, no una falla. El servicio de
    validación lo envuelve en un ValidationResult; el constructor de
    Nuban lo lanza.
    """
    if not is_digit_string(bank_code, BANK_CODE_LENGTH):
        return InvalidBankCodeError(bank_code)
    if not is_digit_string(account_number, ACCOUNT_NUMBER_LENGTH):
        return InvalidAccountNumberError(account_number)
    # Los dos formatos van antes del registro: ("999", "123") reporta la cuenta.
    if not registry.is_valid_bank_code(bank_code):
        return InvalidBankCodeError(bank_code, reason=REASON_UNKNOWN_BANK)

    serial = account_number[:SERIAL_LENGTH]
    actual = int(account_number[SERIAL_LENGTH])
    expected = calculate_check_digit(bank_code, serial)
    if expected != actual:
        return InvalidAccountNumberError(
            account_number, reason=REASON_CHECKSUM, expected=expected, actual=actual
        )
    return None


@dataclass(frozen=True)
class Nuban:
    """Número de cuenta NUBAN validado.

    frozen=True: una vez validado no puede cambiar. Si se necesita otra
    cuenta, se crea otra instancia (y se valida de nuevo).
    """

    bank_code: str
    """Código de banco de 3 dígitos. Ejemplo: '058'."""

    account_number: str
    """Número de cuenta de 10 dígitos, incluido el verificador."""

    registry: BankRegistry | None = field(default=None, repr=False, compare=False)
    """Registro contra el que se validó. None usa el registro por defecto."""

    def __post_init__(self) -> None:
        """Valida el par completo. Lanza el primer error encontrado.

        Raises:
            InvalidBankCodeError: Código mal formado o no registrado.
            InvalidAccountNumberError: Cuenta mal formada o verificador incorrecto.
        """
        if self.registry is None:
            # Import local: el registro importa BankEntry de este paquete
            from nuban.infrastructure.registry import get_default_registry

            object.__setattr__(self, "registry", get_default_registry())

        error = find_nuban_error(self.bank_code, self.account_number, self.registry)
        if error is not None:
            raise error

    @classmethod
    def create(
        cls, bank_code: str, account_number: str, registry: BankRegistry | None = None
    ) -> Nuban:
        """Constructor que lanza excepción ante datos inválidos.

        Equivalente a Nuban(bank_code, account_number). Para validar sin
        excepciones usar nuban.construct().
        """
        return cls(bank_code, account_number, registry)

    # --- Propiedades derivadas ---

    @property
    def check_digit(self) -> str:
        """Dígito verificador (el décimo de la cuenta) como string."""
        return self.account_number[SERIAL_LENGTH]

    @property
    def serial_number(self) -> str:
        """Los primeros 9 dígitos de la cuenta, sin el verificador."""
        return self.account_number[:SERIAL_LENGTH]

    @property
    def bank(self) -> BankEntry:
        """Entrada del registro correspondiente al código de banco."""
        return self.registry.entry(self.bank_code)

    @property
    def bank_name(self) -> str:
        """Nombre del banco.

        Nunca falla: el código ya se validó contra el registro al crear
        la instancia.
        """
        return self.registry.bank_name(self.bank_code)

    def __str__(self) -> str:
        return f"{self.bank_code}{self.account_number}"
