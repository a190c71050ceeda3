"""
Excepciones de dominio del proyecto nuban-validator.

¿Por qué excepciones propias en lugar de usar ValueError/KeyError?
Porque quien valida una cuenta necesita distinguir entre "el código de
banco está mal" y "el número de cuenta está mal" para decirle al usuario
exactamente qué campo corregir.

Jerarquía:
    NubanBaseError
    ├── InvalidBankCodeError        → Código de banco mal formado o desconocido
    ├── InvalidAccountNumberError   → Cuenta mal formada o con dígito verificador incorrecto
    └── BankNotFoundError           → Consulta directa al registro con un código ausente

Las dos primeras son las únicas que produce la validación de un NUBAN.
BankNotFoundError solo aparece si alguien consulta el registro sin
validar primero el código.
"""

# Motivos del rechazo. Se guardan en el atributo `reason` de cada error
# para que el llamador no tenga que parsear el mensaje.
REASON_FORMAT = "format"
REASON_UNKNOWN_BANK = "unknown_bank"
REASON_CHECKSUM = "checksum"


class NubanBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta.

    Permite capturar cualquier error de validación con un solo
    `except NubanBaseError`.
    """


class InvalidBankCodeError(NubanBaseError):
    """El código de banco no es válido.

    Esto puede pasar porque:
    - No tiene exactamente 3 caracteres.
    - Contiene algo distinto de dígitos ASCII.
    - Tiene el formato correcto pero no está en el registro de bancos.
    """

    def __init__(self, bank_code: object, reason: str = REASON_FORMAT, detalle: str = ""):
        self.bank_code = bank_code
        self.reason = reason
        if reason == REASON_UNKNOWN_BANK:
            mensaje = f"Código de banco no registrado: {bank_code!r}"
        else:
            mensaje = f"Código de banco inválido: {bank_code!r}. Se esperaban 3 dígitos"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class InvalidAccountNumberError(NubanBaseError):
    """El número de cuenta no es un NUBAN válido.

    Esto puede pasar porque:
    - No tiene exactamente 10 caracteres.
    - Contiene algo distinto de dígitos ASCII.
    - El décimo dígito no coincide con el dígito verificador calculado.
    """

    def __init__(
        self,
        account_number: object,
        reason: str = REASON_FORMAT,
        expected: int | None = None,
        actual: int | None = None,
        detalle: str = "",
    ):
        self.account_number = account_number
        self.reason = reason
        self.expected = expected
        self.actual = actual
        if reason == REASON_CHECKSUM:
            mensaje = (
                f"Dígito verificador incorrecto en {account_number!r}: "
                f"esperado {expected}, recibido {actual}"
            )
        elif detalle:
            mensaje = f"Número de cuenta inválido: {account_number!r} — {detalle}"
        else:
            mensaje = f"Número de cuenta inválido: {account_number!r}. Se esperaban 10 dígitos"
        super().__init__(mensaje)


class BankNotFoundError(NubanBaseError, KeyError):
    """Se consultó el nombre de un banco que no existe en el registro.

    Hereda también de KeyError porque semánticamente es una búsqueda
    fallida en un mapeo.
    """

    def __init__(self, bank_code: object):
        self.bank_code = bank_code
        super().__init__(f"Banco no encontrado para el código: {bank_code!r}")

    def __str__(self) -> str:
        # KeyError.__str__ envuelve el mensaje en comillas
        return str(self.args[0])
