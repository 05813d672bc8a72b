"""Main CLI entry point for papr."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from papr.config.config_loader import ConfigError, ConfigLoader
from papr.config.papr_config import AppConfig
from papr.services.mbox_parser import MailboxParser, MboxParseError
from papr.services.rendering import MailboxRenderer
from papr.utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)

STDIN_NAME = "STDIN"


def read_inputs(files: list[str]) -> list[tuple[str, str]]:
    """
    Read every input file, or STDIN when no file is given.

    Returns:
        List of (display name, content) tuples

    Raises:
        OSError: If a file cannot be read
    """
    if not files:
        return [(STDIN_NAME, sys.stdin.read())]

    inputs = []
    for file in files:
        path = Path(file)
        inputs.append((file, path.read_text(encoding="utf-8")))
    return inputs


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply command line flags on top of the loaded config."""
    if args.no_color:
        config.renderer.color = False
    if args.workers is not None:
        config.parser.workers = args.workers
    if args.skip_invalid:
        config.parser.strict = False
    return config


def process_files(
    files: list[str],
    config: AppConfig,
    front_matter: bool = False,
    console: Optional[Console] = None,
) -> int:
    """
    Parse and render each input.

    Args:
        files: Input paths (empty: read STDIN)
        config: Application config
        front_matter: Render only front matter, footers and configured headers
        console: Output console (default: stdout console)

    Returns:
        Process exit status
    """
    console = console or Console(highlight=False, emoji=False, no_color=not config.renderer.color)
    error_console = Console(stderr=True, highlight=False, emoji=False)

    parser = MailboxParser(workers=config.parser.workers, strict=config.parser.strict)
    renderer = MailboxRenderer(config.renderer)

    try:
        inputs = read_inputs(files)
    except OSError as e:
        error_console.print(f"Error: could not read input: {e}", style="red", markup=False)
        return 1

    for name, content in inputs:
        logger.info("Parsing %s (%d chars)", name, len(content))

        try:
            mailbox = parser.parse(content)
        except MboxParseError as e:
            error_console.print(f"Error: {name}: {e}", style="red", markup=False)
            if e.context:
                error_console.print(f"  {e.context}", style="dim", markup=False)
            return 1

        for error in mailbox.errors:
            error_console.print(f"Warning: {name}: skipped {error}", style="yellow", markup=False)

        rendered = renderer.render_mailbox(mailbox, front_matter=front_matter)
        end = "" if rendered.plain.endswith("\n") else "\n"

        console.print(f"{name}:", markup=False, soft_wrap=True)
        console.print(rendered, end=end, soft_wrap=True)

    return 0


def cmd_init_config(config_path: Optional[Path]) -> int:
    """Write the default config file."""
    path = ConfigLoader(config_path).save_app_config(AppConfig())
    print(f"Config written to: {path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="papr",
        description=(
            "Syntax highlighting for mbox files. Patch mails get special treatment: "
            "[PATCH vN i/n] subjects, trailers and the --- delimiter are highlighted."
        ),
    )
    parser.add_argument("files", nargs="*", help="mbox file(s) to display (default: STDIN)")
    parser.add_argument(
        "-f",
        "--frontmatter",
        action="store_true",
        help="Reduce messages to their front matter",
    )
    parser.add_argument("--config", type=Path, help="Custom config file path")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("--workers", type=int, help="Parse messages on N threads")
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip invalid messages instead of aborting",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write the default config file and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "WARNING")

    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be at least 1")

    if args.init_config:
        return cmd_init_config(args.config)

    try:
        config = ConfigLoader(args.config).load_app_config()
        config = apply_overrides(config, args)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return process_files(args.files, config, front_matter=args.frontmatter)


if __name__ == "__main__":
    sys.exit(main())
