"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita el dominio, sin decir CÓMO se implementa.

Uso:
    from nuban.domain.ports import ValidationLogger
"""

from nuban.domain.ports.validation_logger import NullLogger, ValidationLogger

__all__ = [
    "NullLogger",
    "ValidationLogger",
]
