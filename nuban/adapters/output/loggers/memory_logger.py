"""
Adaptador de salida: Logger en memoria.

Acumula contadores y errores en memoria. Sirve como base del
ConsoleLogger y para hacer asserts en tests.
"""

from nuban.domain.exceptions import NubanBaseError
from nuban.domain.models.nuban import Nuban
from nuban.domain.ports.validation_logger import ValidationLogger


class MemoryLogger(ValidationLogger):
    """Logger que acumula los eventos en memoria."""

    def __init__(self) -> None:
        self._cuentas_validas: int = 0
        self._rechazos_por_motivo: dict[str, int] = {}
        self._errores: list[dict] = []

    def log_validated(self, nuban: Nuban) -> None:
        self._cuentas_validas += 1

    def log_rejected(self, bank_code: object, account_number: object, error: NubanBaseError) -> None:
        motivo = getattr(error, "reason", "desconocido")
        self._rechazos_por_motivo[motivo] = self._rechazos_por_motivo.get(motivo, 0) + 1
        self._errores.append({"cuenta": f"{bank_code} {account_number}", "error": str(error)})

    def get_summary(self) -> dict:
        return {
            "cuentas_recibidas": self._cuentas_validas + len(self._errores),
            "cuentas_validas": self._cuentas_validas,
            "cuentas_rechazadas": len(self._errores),
            "rechazos_por_motivo": dict(self._rechazos_por_motivo),
            "errores": list(self._errores),
        }
