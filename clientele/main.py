"""Composition root for the Clientele customer registry.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Entry point selection (one-shot create or interactive CLI)
"""

import json
import logging
import sys
from typing import Any

from clientele.adapters.cli.commands import CLICommandHandler
from clientele.adapters.ids.random_source import RandomIdSource
from clientele.config import Settings, load_settings
from clientele.core.factory import CustomerFactory
from clientele.core.id_pool import IdPool
from clientele.core.validator import Validator


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for customer commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("clientele> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            # Parse command and arguments
            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, ensure_ascii=False))
            except ValueError as e:
                logger.error(f"Command execution error: {e}")
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            # Ctrl+C
            logger.info("Interrupted by user")
            continue


def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: Any,
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments, parsed from JSON.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized, or arguments are missing
            or not a JSON object.
    """
    if not isinstance(args, dict):
        raise ValueError("arguments must be a JSON object")

    if command == "create":
        if "args" not in args or not isinstance(args["args"], list):
            raise ValueError("Missing required parameter: args (list of strings)")
        return cli_handler.create_customer(
            [str(arg) for arg in args["args"]],
            format=args.get("format", "json"),
            verbose=args.get("verbose", False),
        )

    elif command == "split":
        if "name" not in args:
            raise ValueError("Missing required parameter: name")
        return cli_handler.split_name(str(args["name"]))

    elif command == "contact":
        if "value" not in args:
            raise ValueError("Missing required parameter: value")
        return cli_handler.validate_contact(str(args["value"]))

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  create
    Create a customer from name parts and contacts.
    Required: args
    Optional: format (json, text)

    Example: create {"args": ["Eric", "Meyer", "eric98@yahoo.com"]}

  split
    Show how a name splits into first and last name.
    Required: name

    Example: split {"name": "Meyer, Anne"}

  contact
    Check whether a value is accepted as a contact.
    Required: value

    Example: contact {"value": "(030) 3945-642298"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_factory(settings: Settings) -> CustomerFactory:
    """Wire the id source, id pool and validator into a customer factory.

    Args:
        settings: Validated application settings.

    Returns:
        A new CustomerFactory owning its own id pool.
    """
    source = RandomIdSource(
        lower=settings.id_range_lower,
        upper=settings.id_range_upper,
        seed=settings.id_seed,
    )
    id_pool = IdPool(
        source=source,
        initial=settings.id_pool_initial_ids,
        batch_size=settings.id_pool_batch_size,
    )
    return CustomerFactory(id_pool=id_pool, validator=Validator())


def bootstrap(argv: list[str]) -> int:
    """Load configuration, wire adapters, and run the requested command.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and core services
    4. Create one customer from argv, or start the interactive CLI

    Args:
        argv: Command-line arguments without the program name.

    Returns:
        Process exit code.
    """
    # Step 1: Load configuration
    settings = load_settings()

    # Step 2: Configure logging
    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.debug("Loading Clientele customer registry...")

    # Step 3: Wire components
    factory = build_factory(settings)
    cli_handler = CLICommandHandler(factory)

    # Step 4: Run
    if not argv:
        _run_cli_interactive(cli_handler)
        return 0

    result = cli_handler.create_customer(argv, verbose=settings.debug)
    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0 if result["status"] == "success" else 1


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Success
        1: Customer could not be created, or fatal error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        sys.exit(bootstrap(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
