"""
Registro de bancos nigerianos (código CBN → nombre).

Centraliza la relación código_banco → nombre. Es la única fuente de
verdad para saber si un código de banco existe.

La tabla se define una sola vez al importar el módulo y nunca se
modifica: se expone como MappingProxyType (vista de solo lectura), así
que ni siquiera por error se puede agregar o borrar un banco en
tiempo de ejecución.

El registro por defecto se crea la primera vez que se pide
(get_default_registry) y se comparte en todo el proceso. La creación
está protegida con un Lock para que dos hilos que lo pidan a la vez
obtengan la misma instancia.
"""

import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from nuban.domain.exceptions import BankNotFoundError
from nuban.domain.models.bank import BankEntry
from nuban.domain.shared.checksum import BANK_CODE_LENGTH
from nuban.domain.shared.digits import is_digit_string

# Los nombres se conservan tal como aparecen en la tabla del regulador,
# incluido "Intercontinentl".
NIGERIAN_BANKS: Mapping[str, str] = MappingProxyType(
    {
        "044": "Access Bank",
        "014": "Afribank",
        "023": "Citibank",
        "063": "Diamond Bank",
        "050": "Ecobank",
        "040": "Equitorial Trust Bank",
        "011": "First Bank",
        "214": "FCMB",
        "070": "Fidelity",
        "085": "FinBank",
        "058": "Guaranty Trust Bank",
        "069": "Intercontinentl Bank",
        "056": "Oceanic Bank",
        "082": "BankPhb",
        "076": "Skye Bank",
        "084": "SpringBank",
        "221": "StanbicIBTC",
        "068": "Standard Chartered Bank",
        "232": "Sterling Bank",
        "033": "United Bank For Africa",
        "032": "Union Bank",
        "035": "Wema Bank",
        "057": "Zenith Bank",
        "215": "Unity Bank",
    }
)


class BankRegistry:
    """Registro de solo lectura de bancos por código."""

    def __init__(self, banks: Mapping[str, str] = NIGERIAN_BANKS) -> None:
        """
        Args:
            banks: Mapeo código → nombre. Se copia y se congela, así que
                   modificar el original después no afecta al registro.

        Raises:
            ValueError: Si algún código no es de 3 dígitos o algún nombre
                        está vacío (lo valida BankEntry).
        """
        entries = {code: BankEntry(code=code, name=name) for code, name in banks.items()}
        self._entries: Mapping[str, BankEntry] = MappingProxyType(entries)
        self._banks: Mapping[str, str] = MappingProxyType(dict(banks))

    def is_valid_bank_code(self, code: object) -> bool:
        """True si el código tiene 3 dígitos ASCII y está registrado."""
        return is_digit_string(code, BANK_CODE_LENGTH) and code in self._entries

    def get(self, code: str) -> BankEntry | None:
        """Obtiene la entrada de un banco.

        Returns:
            BankEntry si existe, None si el código no está registrado.
        """
        if not isinstance(code, str):
            return None
        return self._entries.get(code)

    def entry(self, code: str) -> BankEntry:
        """Igual que get(), pero lanza BankNotFoundError si no existe."""
        found = self.get(code)
        if found is None:
            raise BankNotFoundError(code)
        return found

    def bank_name(self, code: str) -> str:
        """Nombre del banco para un código.

        Raises:
            BankNotFoundError: Si el código no está en el registro. No debería
                               pasar con un código que ya pasó is_valid_bank_code().
        """
        return self.entry(code).name

    @property
    def banks(self) -> Mapping[str, str]:
        """Vista de solo lectura código → nombre."""
        return self._banks

    @property
    def entries(self) -> tuple[BankEntry, ...]:
        """Todos los bancos ordenados por código."""
        return tuple(sorted(self._entries.values()))

    def __contains__(self, code: object) -> bool:
        return self.is_valid_bank_code(code)

    def __iter__(self) -> Iterator[BankEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self._entries)


_default_registry: BankRegistry | None = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> BankRegistry:
    """Devuelve el registro compartido por todo el proceso.

    Se crea la primera vez que se pide. Después de eso solo se lee,
    así que las lecturas no necesitan el lock.
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = BankRegistry(NIGERIAN_BANKS)
    return _default_registry


def is_valid_bank_code(code: object) -> bool:
    """Atajo de get_default_registry().is_valid_bank_code(code)."""
    return get_default_registry().is_valid_bank_code(code)


def bank_name(code: str) -> str:
    """Atajo de get_default_registry().bank_name(code)."""
    return get_default_registry().bank_name(code)
