"""Entry point for running the group chat assistant.

This module provides the command-line front end for the assistant.
It handles:
- Configuration loading
- Logging setup
- Chat data loading
- One-shot queries (-q) or an interactive conversation on stdin
"""

import argparse
import sys
import uuid
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import structlog

from group_chat_assistant._version import __version__
from group_chat_assistant.utils.logging import LogEventNames

if TYPE_CHECKING:
    from group_chat_assistant.core.session import ConversationSession

log = structlog.get_logger()

PROMPT = "> "


def setup_logging(debug: bool = False, log_format: str = "console") -> None:
    """Configure structured logging before the config file is read.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
    """
    from group_chat_assistant.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.WARNING
    configure_logging(level=level, log_format=LogFormat(log_format.lower()))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="group-chat-assistant",
        description="Group Chat Assistant - ask questions about your group chat",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: built-in defaults)",
    )

    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Chat data file (JSON or YAML); overrides data.path from config",
    )

    parser.add_argument(
        "--history",
        type=Path,
        default=None,
        help="Save the conversation to this JSON file; overrides history settings",
    )

    parser.add_argument(
        "-q",
        "--query",
        action="append",
        default=[],
        help="Answer this query and exit (may be repeated)",
    )

    parser.add_argument(
        "--html",
        action="store_true",
        help="Print responses as HTML instead of markdown-lite text",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default=None,
        help="Log output format (default: from config, else console)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Load config and chat data, then exit without answering",
    )

    return parser.parse_args(argv)


def format_response(response: str, html: bool = False) -> str:
    """Prepare a response for the terminal."""
    if html:
        from group_chat_assistant.utils.markup import to_html

        return to_html(response)
    return response


def run_interactive(
    session: "ConversationSession",
    html: bool = False,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> None:
    """Hold a conversation on the terminal until EOF or /quit.

    Commands:
        /help     Show what the assistant understands
        /history  Print the conversation so far
        /clear    Forget the conversation and start over
        /quit     Leave
    """
    from group_chat_assistant.core.session import QUICK_ACTIONS

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def emit(text: str) -> None:
        print(format_response(text, html), file=stdout)
        print(file=stdout)

    emit(session.welcome())
    print("Try: " + " | ".join(QUICK_ACTIONS), file=stdout)

    while True:
        print(PROMPT, end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break

        command = line.strip()
        if command in ("/quit", "/exit"):
            break
        if command == "/help":
            emit(session.welcome())
        elif command == "/clear":
            session.clear()
            emit(session.welcome())
        elif command == "/history":
            for entry in session.history:
                print(f"[{entry.role.value}] {entry.content}", file=stdout)
            print(file=stdout)
        else:
            response = session.ask(line)
            if response is not None:
                emit(response)


def run(args: argparse.Namespace, stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the assistant with parsed arguments.

    Args:
        args: Parsed command line arguments
        stdin: Input stream for the interactive loop
        stdout: Output stream for responses

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    from group_chat_assistant.adapters.history import JsonFileHistoryStore
    from group_chat_assistant.config.loader import load_config
    from group_chat_assistant.core.assistant import create_assistant
    from group_chat_assistant.core.session import ConversationSession
    from group_chat_assistant.utils.errors import ChatDataError
    from group_chat_assistant.utils.logging import (
        LogLevel,
        bind_context,
        clear_context,
        configure_logging,
    )

    stdout = stdout or sys.stdout

    try:
        config = load_config(args.config)

        if args.data is not None:
            config.data = config.data.model_copy(update={"path": args.data, "format": "auto"})

        configure_logging(
            level=LogLevel.DEBUG if args.debug else config.logging.level,
            log_format=args.format or config.logging.format,
            file_path=config.logging.file.path if config.logging.file.enabled else None,
            file_enabled=config.logging.file.enabled,
            max_value_length=config.logging.max_value_length,
        )
        log.info(
            LogEventNames.CONFIGURATION_LOADED,
            version=__version__,
            config_path=str(args.config) if args.config else None,
        )

        assistant = create_assistant(config)

        if args.dry_run:
            log.info(LogEventNames.DRY_RUN_CONFIG_VALID)
            return 0

        history_store = None
        if args.history is not None:
            history_store = JsonFileHistoryStore(args.history)
        elif config.history.enabled:
            history_store = JsonFileHistoryStore(config.history.path)

        session = ConversationSession(
            assistant,
            history_store=history_store,
            max_entries=config.history.max_entries,
        )

        bind_context(session_id=uuid.uuid4().hex[:8])
        log.info(LogEventNames.SESSION_STARTED, history=history_store is not None)

        if args.query:
            for query in args.query:
                response = session.ask(query)
                if response is not None:
                    print(format_response(response, args.html), file=stdout)
                    print(file=stdout)
        else:
            run_interactive(session, html=args.html, stdin=stdin, stdout=stdout)

        return 0

    except FileNotFoundError as e:
        log.error(LogEventNames.FILE_NOT_FOUND, error=str(e))
        return 1
    except ChatDataError as e:
        log.error(LogEventNames.CHAT_DATA_INVALID, error=str(e))
        return 1
    except ValueError as e:
        log.error(LogEventNames.CONFIGURATION_INVALID, error=str(e))
        return 1
    finally:
        clear_context()


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_format=args.format or "console")

    try:
        return run(args)
    except KeyboardInterrupt:
        log.info(LogEventNames.SHUTTING_DOWN)
        return 0


if __name__ == "__main__":
    sys.exit(main())
