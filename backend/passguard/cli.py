"""PassGuard command-line interface.

    passguard check [PASSWORD]   validate one password (prompts if omitted)
    passguard rules              list active rules
    passguard menu               interactive menu (default)
    passguard serve              run the HTTP API
"""

import argparse
import sys
from getpass import getpass
from typing import Callable, Optional

from passguard import __version__
from passguard.config import get_settings
from passguard.log_config import configure_logging
from passguard.validators import ValidationEngine, ValidationResult, get_validation_engine

CLEAR_SCREEN = "\033[H\033[2J"

MENU_OPTIONS = (
    "[1] Check password",
    "[2] List rules",
    "[3] Exit",
)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    parser = argparse.ArgumentParser(
        prog="passguard",
        description="Check passwords against the password policy",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    check_parser = subparsers.add_parser("check", help="Validate one password")
    check_parser.add_argument(
        "password",
        nargs="?",
        default=None,
        help="Password to check. Prompted for (hidden) if omitted.",
    )

    subparsers.add_parser("rules", help="List active rules")
    subparsers.add_parser("menu", help="Interactive menu")
    subparsers.add_parser("serve", help="Run the HTTP API")

    return parser.parse_args(argv)


def print_result(result: ValidationResult) -> None:
    """Print the outcome with one line per failed rule."""
    if result.passed:
        print("Password accepted")
        return

    print(f"Password rejected ({result.failure_count} issue(s)):")
    for message in result.messages:
        print(f"  - {message}")


def print_rules(engine: ValidationEngine) -> None:
    for position, rule in enumerate(engine.rules, start=1):
        print(f"{position}. {rule.name}: {rule.message}")


def check_password(engine: ValidationEngine, password: Optional[str] = None) -> int:
    """Validate one password. Returns the process exit code."""
    if password is None:
        password = getpass("Enter password: ")

    result = engine.validate(password)
    print_result(result)
    return 0 if result.passed else 1


def run_menu(
    engine: ValidationEngine,
    input_fn: Callable[[str], str] = input,
    password_fn: Callable[[str], str] = getpass,
) -> int:
    """Interactive loop: redraw the menu until the user picks Exit."""
    while True:
        print(CLEAR_SCREEN, end="")
        print("Choose an option:")
        for option in MENU_OPTIONS:
            print(option)

        try:
            choice = input_fn("> ").strip()
        except EOFError:
            print()
            return 0

        if choice == "1":
            result = engine.validate(password_fn("Enter password: "))
            print_result(result)
        elif choice == "2":
            print_rules(engine)
        elif choice == "3":
            print("Exited")
            return 0
        else:
            print("Not an option")

        try:
            input_fn("Press Enter to continue...")
        except EOFError:
            print()
            return 0


def serve() -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "passguard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for the ``passguard`` console script."""
    args = parse_args(argv)

    settings = get_settings()
    # Logs on stderr, warnings only unless DEBUG
    configure_logging(
        settings.DEBUG,
        settings.LOG_LEVEL if settings.DEBUG else "warning",
        stream=sys.stderr,
    )

    if args.command == "serve":
        return serve()

    engine = get_validation_engine()

    if args.command == "check":
        return check_password(engine, args.password)
    if args.command == "rules":
        print_rules(engine)
        return 0
    return run_menu(engine)


if __name__ == "__main__":
    sys.exit(main())
