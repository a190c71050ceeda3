"""
Adaptador de salida: Logger a consola.

Implementación de ValidationLogger que imprime cada cuenta validada o
rechazada a stdout, con un formato consistente y un resumen final.

Útil para:
- El CLI (validación individual o por lote).
- Debugging manual desde terminal.
"""

from nuban.adapters.output.loggers.memory_logger import MemoryLogger
from nuban.domain.exceptions import NubanBaseError
from nuban.domain.models.nuban import Nuban


class ConsoleLogger(MemoryLogger):
    """Logger que imprime eventos de validación a consola."""

    def log_validated(self, nuban: Nuban) -> None:
        super().log_validated(nuban)
        print(f"  ✅ Válida: {nuban.bank_code} {nuban.account_number} — {nuban.bank_name}")

    def log_rejected(self, bank_code: object, account_number: object, error: NubanBaseError) -> None:
        super().log_rejected(bank_code, account_number, error)
        print(f"  ❌ Rechazada: {bank_code} {account_number} — {error}")

    def print_summary(self) -> None:
        """Imprime el resumen final de las validaciones."""
        summary = self.get_summary()
        print("\n" + "=" * 60)
        print("RESUMEN DE VALIDACIÓN")
        print("=" * 60)
        print(f"  Cuentas recibidas:   {summary['cuentas_recibidas']}")
        print(f"  Cuentas válidas:     {summary['cuentas_validas']}")
        print(f"  Cuentas rechazadas:  {summary['cuentas_rechazadas']}")

        if summary["rechazos_por_motivo"]:
            print("\n  RECHAZOS POR MOTIVO:")
            for motivo, cantidad in sorted(summary["rechazos_por_motivo"].items()):
                print(f"    - {motivo}: {cantidad}")

        print("=" * 60)
