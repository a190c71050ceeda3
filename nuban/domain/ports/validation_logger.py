"""
Puerto de salida: Bitácora de validaciones (Validation Logger).

Define el contrato para registrar qué cuentas se aceptaron y cuáles se
rechazaron. El dominio solo conoce los eventos de negocio:
- "Se validó la cuenta 058 0152792740 (Guaranty Trust Bank)"
- "Se rechazó la cuenta 058 0982736625: dígito verificador incorrecto"

La implementación decide qué hacer con ellos:
- Como librería: no imprimir nada (NullLogger).
- Desde la terminal: imprimir y mostrar un resumen (ConsoleLogger).
- En tests: acumular en memoria y hacer asserts.
"""

from abc import ABC, abstractmethod

from nuban.domain.exceptions import NubanBaseError
from nuban.domain.models.nuban import Nuban


class ValidationLogger(ABC):
    """Interfaz para la bitácora de validaciones."""

    @abstractmethod
    def log_validated(self, nuban: Nuban) -> None:
        """Registra una cuenta que pasó todas las validaciones."""
        ...

    @abstractmethod
    def log_rejected(self, bank_code: object, account_number: object, error: NubanBaseError) -> None:
        """Registra una cuenta rechazada.

        Args:
            bank_code: Código de banco tal como se recibió.
            account_number: Número de cuenta tal como se recibió.
            error: Primer error encontrado (InvalidBankCodeError o
                   InvalidAccountNumberError).
        """
        ...

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de las validaciones registradas.

        Returns:
            Diccionario con métricas:
            {
                'cuentas_recibidas': int,
                'cuentas_validas': int,
                'cuentas_rechazadas': int,
                'rechazos_por_motivo': dict[str, int],
                'errores': list[dict],  # [{cuenta, error}]
            }
        """
        ...


class NullLogger(ValidationLogger):
    """Logger que descarta todos los eventos.

    Es el logger por defecto del NubanValidator cuando el paquete se usa
    como librería: validar una cuenta no imprime nada ni acumula memoria.
    """

    def log_validated(self, nuban: Nuban) -> None:
        pass

    def log_rejected(self, bank_code: object, account_number: object, error: NubanBaseError) -> None:
        pass

    def get_summary(self) -> dict:
        return {
            "cuentas_recibidas": 0,
            "cuentas_validas": 0,
            "cuentas_rechazadas": 0,
            "rechazos_por_motivo": {},
            "errores": [],
        }
