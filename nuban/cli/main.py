"""
Punto de entrada CLI: nuban.

Uso:
    # Validar una cuenta
    nuban validate 058 0152792740

    # Calcular el dígito verificador de un serial de 9 dígitos
    nuban check-digit 058 015279274

    # Listar los bancos registrados
    nuban banks

    # Qué bancos aceptan un número de cuenta
    nuban candidates 0152792740

    # Validar un archivo con un par "CODIGO CUENTA" por línea
    nuban batch cuentas.txt

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea el registro y el logger concretos.
- Los inyecta en el NubanValidator.
- Ejecuta el subcomando.

No contiene lógica de negocio — solo "fontanería" (wiring).
"""

import argparse
import sys
from pathlib import Path

from nuban.adapters.output.loggers.console_logger import ConsoleLogger
from nuban.domain.exceptions import NubanBaseError
from nuban.domain.services.nuban_validator import NubanValidator
from nuban.infrastructure.registry import get_default_registry


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI.

    Returns:
        Código de salida: 0 si todo fue válido, 1 si hubo rechazos o errores.
    """
    args = _parse_args(argv)

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()
    registry = get_default_registry()
    validator = NubanValidator(registry=registry, logger=logger)

    if args.command == "validate":
        resultado = validator.construct(args.bank_code, args.account_number)
        return 0 if resultado.is_ok else 1

    if args.command == "check-digit":
        try:
            cuenta = validator.generate_account_number(args.bank_code, args.serial_number)
        except NubanBaseError as e:
            print(f"❌ {e}")
            return 1
        print(cuenta)
        return 0

    if args.command == "banks":
        for entry in registry.entries:
            print(f"  {entry.code}  {entry.name}")
        return 0

    if args.command == "candidates":
        try:
            bancos = validator.candidate_banks(args.account_number)
        except NubanBaseError as e:
            print(f"❌ {e}")
            return 1
        if not bancos:
            print(f"Ningún banco registrado acepta la cuenta {args.account_number}")
            return 1
        for entry in bancos:
            print(f"  {entry.code}  {entry.name}")
        return 0

    # batch
    input_path = Path(args.input_path)
    if not input_path.is_file():
        print(f"❌ La ruta no existe: {input_path}")
        return 1

    print("=" * 60)
    print("NUBAN VALIDATOR")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print()

    validator.validate_many(_read_pairs(input_path))
    logger.print_summary()
    return 0 if logger.get_summary()["cuentas_rechazadas"] == 0 else 1


def _read_pairs(input_path: Path) -> list[tuple[str, str]]:
    """Lee pares "CODIGO CUENTA" de un archivo de texto.

    Se ignoran líneas vacías y comentarios (#). Una línea con un solo
    campo se toma como código sin cuenta, y los campos de más se dejan
    pegados a la cuenta, para que la línea se rechace y quede en la
    bitácora en lugar de validarse a medias.
    """
    pairs: list[tuple[str, str]] = []
    for line in input_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        campos = line.replace(",", " ").split()
        bank_code = campos[0]
        account_number = " ".join(campos[1:])
        pairs.append((bank_code, account_number))
    return pairs


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="nuban",
        description="Validador de números de cuenta NUBAN (Nigeria)",
        epilog="Ejemplo: nuban validate 058 0152792740",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Valida una cuenta")
    validate.add_argument("bank_code", help="Código de banco de 3 dígitos")
    validate.add_argument("account_number", help="Número de cuenta de 10 dígitos")

    check_digit = subparsers.add_parser(
        "check-digit", help="Completa un serial de 9 dígitos con su verificador"
    )
    check_digit.add_argument("bank_code", help="Código de banco de 3 dígitos")
    check_digit.add_argument("serial_number", help="Primeros 9 dígitos de la cuenta")

    subparsers.add_parser("banks", help="Lista los bancos registrados")

    candidates = subparsers.add_parser(
        "candidates", help="Lista los bancos para los que la cuenta es válida"
    )
    candidates.add_argument("account_number", help="Número de cuenta de 10 dígitos")

    batch = subparsers.add_parser("batch", help="Valida un archivo de pares CODIGO CUENTA")
    batch.add_argument("input_path", help="Archivo de texto con un par por línea")

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
