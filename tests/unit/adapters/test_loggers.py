"""
Tests para los adaptadores de ValidationLogger.
"""

from nuban.adapters.output.loggers.console_logger import ConsoleLogger
from nuban.adapters.output.loggers.memory_logger import MemoryLogger
from nuban.domain.exceptions import InvalidAccountNumberError, InvalidBankCodeError
from nuban.domain.models import Nuban
from nuban.domain.ports.validation_logger import NullLogger


class TestNullLogger:
    def test_no_acumula_nada(self):
        logger = NullLogger()
        logger.log_validated(Nuban("058", "0152792740"))
        logger.log_rejected("999", "0152792740", InvalidBankCodeError("999"))
        assert logger.get_summary()["cuentas_recibidas"] == 0


class TestMemoryLogger:
    def test_acumula_errores(self):
        logger = MemoryLogger()
        error = InvalidAccountNumberError("01527927")
        logger.log_rejected("058", "01527927", error)

        summary = logger.get_summary()
        assert summary["cuentas_rechazadas"] == 1
        assert summary["errores"] == [{"cuenta": "058 01527927", "error": str(error)}]
        assert summary["rechazos_por_motivo"] == {"format": 1}

    def test_summary_es_una_copia(self):
        logger = MemoryLogger()
        logger.get_summary()["errores"].append({"cuenta": "x", "error": "y"})
        assert logger.get_summary()["errores"] == []


class TestConsoleLogger:
    def test_imprime_cuenta_valida(self, capsys):
        ConsoleLogger().log_validated(Nuban("058", "0152792740"))
        salida = capsys.readouterr().out
        assert "Válida" in salida
        assert "Guaranty Trust Bank" in salida

    def test_imprime_cuenta_rechazada(self, capsys):
        ConsoleLogger().log_rejected("999", "0152792740", InvalidBankCodeError("999"))
        assert "Rechazada: 999 0152792740" in capsys.readouterr().out

    def test_print_summary(self, capsys):
        logger = ConsoleLogger()
        logger.log_validated(Nuban("058", "0152792740"))
        logger.log_rejected("999", "0152792740", InvalidBankCodeError("999", "unknown_bank"))
        capsys.readouterr()

        logger.print_summary()
        salida = capsys.readouterr().out
        assert "RESUMEN DE VALIDACIÓN" in salida
        assert "Cuentas válidas:     1" in salida
        assert "unknown_bank: 1" in salida
