"""
nuban — validación de números de cuenta NUBAN (Nigeria).

Uso:
    from nuban import construct, is_valid, is_valid_bank_code

    resultado = construct("058", "0152792740")
    if resultado.is_ok:
        print(resultado.nuban.bank_name)     # Guaranty Trust Bank
    else:
        print(resultado.error)
"""

from nuban.domain.exceptions import (
    BankNotFoundError,
    InvalidAccountNumberError,
    InvalidBankCodeError,
    NubanBaseError,
)
from nuban.domain.models import BankEntry, Nuban, ValidationResult
from nuban.domain.services.nuban_validator import (
    NubanValidator,
    candidate_banks,
    construct,
    generate_account_number,
    is_valid,
)
from nuban.domain.shared.checksum import calculate_check_digit
from nuban.infrastructure.registry import (
    NIGERIAN_BANKS,
    BankRegistry,
    bank_name,
    get_default_registry,
    is_valid_bank_code,
)

__all__ = [
    "NIGERIAN_BANKS",
    "BankEntry",
    "BankNotFoundError",
    "BankRegistry",
    "InvalidAccountNumberError",
    "InvalidBankCodeError",
    "Nuban",
    "NubanBaseError",
    "NubanValidator",
    "ValidationResult",
    "bank_name",
    "calculate_check_digit",
    "candidate_banks",
    "construct",
    "generate_account_number",
    "get_default_registry",
    "is_valid",
    "is_valid_bank_code",
]
