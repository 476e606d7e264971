"""
wdym entrypoint.

Parses flags, assembles Settings, opens the Gemini client and hands the
run to the mode dispatcher.
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import Callable, List, Mapping, Optional

from . import __version__, config, config_file
from .config import Settings
from .dispatch import dispatch
from .errors import ConfigurationError, WdymError
from .llm.client import GeminiClient

logger = logging.getLogger(__name__)

DESCRIPTION = """wdym (What Do You Mean?) is an AI-powered command-line assistant that helps you:
- Analyze your recently executed commands
- Generate shell commands from natural language
- Read and modify files with AI assistance
- Get contextual help and suggestions"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wdym",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-s", "--shell", action="store_true", help="Generate shell commands")
    parser.add_argument("-w", "--write", action="store_true", help="Write or edit files")
    parser.add_argument("-c", "--code", action="store_true", help="Generate code only")
    parser.add_argument("-q", "--query", default="", help="Query string for AI analysis")
    parser.add_argument("-f", "--file", default="",
                        help="File to read or write (or use @filename syntax)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("request", nargs="?", help="Request text, or @filename")
    parser.add_argument("question", nargs="?", help="Question about the @filename")
    return parser


def parse_settings(argv: Optional[List[str]] = None,
                   environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build the run's Settings from command-line arguments and environment.

    Raises:
        ConfigurationError: If GEMINI_API_KEY is not set
    """
    environ = os.environ if environ is None else environ
    args = build_parser().parse_args(argv)

    api_key = environ.get(config.API_KEY_ENV, "")
    if not api_key:
        raise ConfigurationError(f"{config.API_KEY_ENV} environment variable is not set")

    query = args.query
    if args.request:
        query = args.request

    file_path = args.file
    if query.startswith("@"):
        file_path = query[1:]
        query = args.question or "What does this file do?"

    return Settings(
        api_key=api_key,
        query=query,
        file_path=file_path,
        shell=args.shell,
        write=args.write,
        code=args.code,
        model=config.resolve_model(environ),
        base_url=config.resolve_base_url(environ),
        timeout=config.resolve_timeout(environ),
    )


async def run(settings: Settings,
              client_factory: Callable[..., GeminiClient] = GeminiClient) -> None:
    """Open the client, dispatch, and always close the client."""
    ai = client_factory(
        api_key=settings.api_key,
        model=settings.model,
        base_url=settings.base_url,
        timeout=settings.timeout,
    )
    ai.initialize()
    try:
        await dispatch(ai, settings)
    finally:
        await ai.cleanup()


def setup_logging() -> None:
    level = logging.DEBUG if config_file.get("debug") else logging.WARNING
    logging.basicConfig(level=level, format="wdym: %(levelname)s: %(name)s: %(message)s",
                        stream=sys.stderr)


def main(argv: Optional[List[str]] = None):
    """Parse arguments, run the selected mode, exit non-zero on failure."""
    setup_logging()
    config.load_env()

    try:
        settings = parse_settings(argv)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f'Please set your Gemini API key: export {config.API_KEY_ENV}="your-api-key"',
              file=sys.stderr)
        sys.exit(1)

    try:
        asyncio.run(run(settings))
    except WdymError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)
    sys.exit(0)


if __name__ == "__main__":
    main()
