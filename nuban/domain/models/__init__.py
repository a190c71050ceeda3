"""
Modelos de dominio del proyecto nuban-validator.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from nuban.domain.models import BankEntry, Nuban, ValidationResult
"""

from nuban.domain.models.bank import BankEntry
from nuban.domain.models.nuban import Nuban
from nuban.domain.models.validation_result import ValidationResult

__all__ = [
    "BankEntry",
    "Nuban",
    "ValidationResult",
]
