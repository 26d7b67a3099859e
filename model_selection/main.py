#!/usr/bin/env python3
"""
Model selection CLI.

Resolves the model to use from --model, settings.json and $GEMINI_MODEL,
optionally verifying candidates against the remote service.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .models import DEFAULT_GEMINI_MODEL, get_supported_models
from .probe import build_probe_client
from .selection import select_model
from .settings import CLIArgs, load_user_settings, settings
from .verification import verify_model

logger = logging.getLogger(__name__)


def setup_logging(log_level: str):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_args(argv: Optional[List[str]] = None) -> CLIArgs:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Resolve the model to use")

    parser.add_argument("--model", "-m", type=str, help="Requested model name")
    parser.add_argument(
        "--settings-path",
        type=str,
        default=None,
        help=f"Path to settings.json (default: {settings.settings_path})",
    )
    parser.add_argument(
        "--default-model",
        type=str,
        default=None,
        help=f"Model used when no candidate is accepted (default: {DEFAULT_GEMINI_MODEL})",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Probe candidates against the remote service instead of the built-in list",
    )
    parser.add_argument(
        "--probe-backend",
        type=str,
        default="gemini",
        choices=["gemini", "openai"],
        help="Service used to verify models",
    )
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=None,
        help=f"Per-probe deadline in ms (default: {settings.verify_timeout_ms})",
    )
    parser.add_argument(
        "--list-models", action="store_true", help="Print supported models and exit"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level.upper(),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )

    args = parser.parse_args(argv)

    return CLIArgs(
        model=args.model,
        settings_path=args.settings_path,
        default_model=args.default_model,
        verify=args.verify,
        probe_backend=args.probe_backend,
        timeout_ms=args.timeout_ms,
        list_models=args.list_models,
        log_level=args.log_level,
    )


async def resolve(args: CLIArgs) -> int:
    """Resolve the model for parsed arguments and print the outcome."""
    user_settings = load_user_settings(args.settings_path or settings.settings_path)
    default_model = args.default_model or DEFAULT_GEMINI_MODEL

    if not args.verify:
        selection = select_model(
            args.model, user_settings.model, settings.gemini_model, default_model
        )
        for line in selection.logs:
            print(line)
        print(selection.model)
        return 0

    if args.probe_backend == "openai":
        api_key, base_url = settings.openai_api_key, settings.openai_base_url
    else:
        api_key, base_url = settings.gemini_api_key, settings.gemini_base_url
    if not api_key:
        logger.error(f"No API key configured for the {args.probe_backend} backend")
        return 1

    client = build_probe_client(args.probe_backend, api_key, base_url)
    try:
        verified = await verify_model(
            args.model,
            user_settings.model,
            settings.gemini_model,
            client,
            default_model,
            timeout_ms=args.timeout_ms or settings.verify_timeout_ms,
        )
    finally:
        await client.close()

    for line in verified.logs:
        print(line)
    print(verified.model)
    return 0


async def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.list_models:
        for model in get_supported_models():
            print(model)
        return 0

    return await resolve(args)


def entrypoint():
    """Entry point for setuptools."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    entrypoint()
