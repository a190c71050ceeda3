"""
Modelo de dominio: Resultado de validar un par (código de banco, cuenta).

Es lo que devuelve construct(): o un Nuban válido, o el error tipado que
explica por qué se rechazó. Nunca ambos, nunca ninguno.

¿Por qué no devolver bool? Porque "inválido" sin detalle no le dice al
usuario qué corregir. ¿Por qué no lanzar? Porque una cuenta mal escrita
es una entrada esperada, no un fallo del programa.
"""

from dataclasses import dataclass

from nuban.domain.exceptions import (
    InvalidAccountNumberError,
    InvalidBankCodeError,
    NubanBaseError,
)
from nuban.domain.models.nuban import Nuban


@dataclass(frozen=True)
class ValidationResult:
    """Resultado de una validación NUBAN."""

    bank_code: object
    """Código de banco tal como se recibió."""

    account_number: object
    """Número de cuenta tal como se recibió."""

    nuban: Nuban | None = None
    """Cuenta validada. None si la validación falló."""

    error: InvalidBankCodeError | InvalidAccountNumberError | None = None
    """Error del primer chequeo que falló. None si la cuenta es válida."""

    def __post_init__(self) -> None:
        if (self.nuban is None) == (self.error is None):
            raise ValueError("Un ValidationResult debe tener exactamente uno de nuban o error")

    @classmethod
    def success(cls, nuban: Nuban) -> "ValidationResult":
        return cls(bank_code=nuban.bank_code, account_number=nuban.account_number, nuban=nuban)

    @classmethod
    def failure(
        cls, bank_code: object, account_number: object, error: NubanBaseError
    ) -> "ValidationResult":
        return cls(bank_code=bank_code, account_number=account_number, error=error)

    @property
    def is_ok(self) -> bool:
        return self.nuban is not None

    @property
    def reason(self) -> str | None:
        """Motivo del rechazo ('format', 'unknown_bank', 'checksum') o None."""
        if self.error is None:
            return None
        return self.error.reason

    def unwrap(self) -> Nuban:
        """Devuelve el Nuban o lanza el error guardado.

        Útil cuando el llamador prefiere excepciones:
            nuban = construct("058", "0152792740").unwrap()
        """
        if self.nuban is None:
            raise self.error
        return self.nuban

    def __bool__(self) -> bool:
        return self.is_ok
