"""
Servicio de dominio: Validador de NUBAN.

Es el único punto de entrada para producir un Nuban a partir de datos
crudos sin usar excepciones:
1. Revisa formatos (código de 3 dígitos, cuenta de 10 dígitos).
2. Busca el código en el registro de bancos.
3. Calcula el dígito verificador y lo compara con el décimo dígito.
4. Devuelve un ValidationResult con el Nuban o con el error.

Además ofrece operaciones derivadas del mismo algoritmo:
- generate_account_number: completa un serial de 9 dígitos con su verificador.
- candidate_banks: qué bancos aceptan un número de cuenta dado.

¿Por qué un servicio y no solo funciones sueltas? Porque el registro y
el logger se reciben por constructor, y así el CLI o un test pueden
inyectar los suyos. Las funciones de módulo (construct, is_valid, ...)
usan una instancia por defecto.
"""

from collections.abc import Iterable

from nuban.domain.exceptions import (
    REASON_UNKNOWN_BANK,
    InvalidAccountNumberError,
    InvalidBankCodeError,
)
from nuban.domain.models.bank import BankEntry
from nuban.domain.models.nuban import Nuban, find_nuban_error
from nuban.domain.models.validation_result import ValidationResult
from nuban.domain.ports.validation_logger import NullLogger, ValidationLogger
from nuban.domain.shared.checksum import (
    ACCOUNT_NUMBER_LENGTH,
    BANK_CODE_LENGTH,
    SERIAL_LENGTH,
    calculate_check_digit,
)
from nuban.domain.shared.digits import is_digit_string
from nuban.infrastructure.registry import BankRegistry, get_default_registry


class NubanValidator:
    """Valida pares (código de banco, número de cuenta).

    Recibe sus dependencias por constructor. No sabe si el logger imprime
    a consola o no hace nada; solo conoce la interfaz.
    """

    def __init__(
        self,
        registry: BankRegistry | None = None,
        logger: ValidationLogger | None = None,
    ) -> None:
        """
        Args:
            registry: Registro de bancos. None usa el registro por defecto.
            logger: Bitácora de validaciones. None usa NullLogger.
        """
        self._registry = registry if registry is not None else get_default_registry()
        self._logger = logger if logger is not None else NullLogger()

    @property
    def registry(self) -> BankRegistry:
        return self._registry

    @property
    def logger(self) -> ValidationLogger:
        return self._logger

    def construct(self, bank_code: str, account_number: str) -> ValidationResult:
        """Valida el par y devuelve el resultado. Nunca lanza por datos inválidos.

        Cuando hay varios problemas se reporta el primero en este orden:
        formato del código, formato de la cuenta, código registrado,
        dígito verificador. Que el código de banco se revise antes que la
        cuenta es una convención de este proyecto, no del regulador.

        Args:
            bank_code: Código de banco de 3 dígitos. Ejemplo: '058'.
            account_number: Número de cuenta de 10 dígitos.

        Returns:
            ValidationResult con el Nuban si es válido, o con
            InvalidBankCodeError / InvalidAccountNumberError si no.
        """
        error = find_nuban_error(bank_code, account_number, self._registry)
        if error is not None:
            self._logger.log_rejected(bank_code, account_number, error)
            return ValidationResult.failure(bank_code, account_number, error)

        nuban = Nuban(bank_code, account_number, self._registry)
        self._logger.log_validated(nuban)
        return ValidationResult.success(nuban)

    def is_valid(self, bank_code: str, account_number: str) -> bool:
        """True si construct() tendría éxito con este par.

        No pasa por el logger: es una consulta, no una validación registrada.
        """
        return find_nuban_error(bank_code, account_number, self._registry) is None

    def validate_many(self, pairs: Iterable[tuple[str, str]]) -> list[ValidationResult]:
        """Valida varios pares y devuelve los resultados en el mismo orden."""
        return [self.construct(bank_code, account_number) for bank_code, account_number in pairs]

    def generate_account_number(self, bank_code: str, serial_number: str) -> str:
        """Completa un serial de 9 dígitos con su dígito verificador.

        Args:
            bank_code: Código de banco registrado.
            serial_number: Los primeros 9 dígitos de la cuenta.

        Returns:
            Número de cuenta de 10 dígitos válido para ese banco.

        Raises:
            InvalidBankCodeError: Código mal formado o no registrado.
            InvalidAccountNumberError: El serial no tiene 9 dígitos ASCII.

        Ejemplos:
            >>> NubanValidator().generate_account_number("058", "015279274")
            '0152792740'
        """
        if not is_digit_string(bank_code, BANK_CODE_LENGTH):
            raise InvalidBankCodeError(bank_code)
        if not is_digit_string(serial_number, SERIAL_LENGTH):
            raise InvalidAccountNumberError(
                serial_number, detalle="Se esperaban 9 dígitos de serial"
            )
        if not self._registry.is_valid_bank_code(bank_code):
            raise InvalidBankCodeError(bank_code, reason=REASON_UNKNOWN_BANK)
        return f"{serial_number}{calculate_check_digit(bank_code, serial_number)}"

    def candidate_banks(self, account_number: str) -> list[BankEntry]:
        """Bancos del registro para los que el número de cuenta es un NUBAN válido.

        Útil cuando el usuario escribe la cuenta pero no sabe (o no dice)
        el banco. Puede devolver varios bancos o ninguno.

        Raises:
            InvalidAccountNumberError: La cuenta no tiene 10 dígitos ASCII.
        """
        if not is_digit_string(account_number, ACCOUNT_NUMBER_LENGTH):
            raise InvalidAccountNumberError(account_number)
        serial = account_number[:SERIAL_LENGTH]
        actual = int(account_number[SERIAL_LENGTH])
        return [
            entry
            for entry in self._registry.entries
            if calculate_check_digit(entry.code, serial) == actual
        ]


_default_validator = NubanValidator()


def construct(bank_code: str, account_number: str) -> ValidationResult:
    """Valida con el registro por defecto. Ver NubanValidator.construct()."""
    return _default_validator.construct(bank_code, account_number)


def is_valid(bank_code: str, account_number: str) -> bool:
    """True si construct(bank_code, account_number) tendría éxito."""
    return _default_validator.is_valid(bank_code, account_number)


def generate_account_number(bank_code: str, serial_number: str) -> str:
    """Ver NubanValidator.generate_account_number()."""
    return _default_validator.generate_account_number(bank_code, serial_number)


def candidate_banks(account_number: str) -> list[BankEntry]:
    """Ver NubanValidator.candidate_banks()."""
    return _default_validator.candidate_banks(account_number)
