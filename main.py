#!/usr/bin/env python3
"""
Gyazo Upload Script

A command-line tool for uploading a single image to Gyazo with optional
metadata (visibility, title, description, source URL and so on).

Usage:
    gyazo-upload path/to/image.png [options]
"""

from __future__ import annotations

import argparse
import json
import math
import sys
import traceback
from dataclasses import asdict
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gyazo_upload.config import ACCESS_TOKEN_VAR, check_timeout, load_settings
from gyazo_upload.exceptions import GyazoError
from gyazo_upload.models.options import AccessPolicy, UploadOptions
from gyazo_upload.models.upload import UploadResult
from gyazo_upload.uploaders.gyazo import GyazoUploader

# Initialize Rich console for output
console = Console()


def timeout_seconds(value: str) -> float:
    """argparse type for --timeout: a number of seconds above zero."""
    try:
        timeout = float(value)
        _ = check_timeout(timeout)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return timeout


def unix_time(value: str) -> float:
    """argparse type for --created-at: a finite Unix timestamp."""
    try:
        timestamp = float(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid Unix time: '{value}'") from e
    if not math.isfinite(timestamp):
        raise argparse.ArgumentTypeError(f"invalid Unix time: '{value}'")
    return timestamp


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list, defaults to sys.argv[1:]

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Upload an image to Gyazo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gyazo-upload shot.png                          # Upload with server defaults
  gyazo-upload shot.png --only-me --title Notes  # Private upload with a title
  gyazo-upload shot.png --json                   # Print the raw API response
        """
    )

    _ = parser.add_argument("image", type=Path, help="Path to the image file to upload")

    policy = parser.add_mutually_exclusive_group()
    _ = policy.add_argument(
        "--anyone",
        dest="access_policy",
        action="store_const",
        const=AccessPolicy.ANYONE,
        help="Image is visible to anyone with the link (server default)"
    )
    _ = policy.add_argument(
        "--only-me",
        dest="access_policy",
        action="store_const",
        const=AccessPolicy.ONLY_ME,
        help="Image is visible only to the uploader"
    )

    metadata = parser.add_mutually_exclusive_group()
    _ = metadata.add_argument(
        "--metadata-public",
        dest="metadata_is_public",
        action="store_const",
        const=True,
        help="Make metadata such as URL and title public"
    )
    _ = metadata.add_argument(
        "--metadata-private",
        dest="metadata_is_public",
        action="store_const",
        const=False,
        help="Keep metadata such as URL and title private"
    )

    _ = parser.add_argument("--referer-url", help="URL of the page captured in the image")
    _ = parser.add_argument("--app", help="Name of the application used to capture the image")
    _ = parser.add_argument("--title", help="Title of the page captured in the image")
    _ = parser.add_argument("--desc", help="Comment or description for the image")
    _ = parser.add_argument(
        "--created-at",
        type=unix_time,
        help="Creation time of the image, Unix time in seconds"
    )
    _ = parser.add_argument("--collection-id", help="Collection to add the image to")

    _ = parser.add_argument(
        "--timeout",
        type=timeout_seconds,
        help="Request timeout in seconds (default: GYAZO_TIMEOUT or 30)"
    )
    _ = parser.add_argument(
        "--json",
        action="store_true",
        help="Print the upload result as JSON"
    )
    _ = parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output for debugging"
    )

    return parser.parse_args(argv)


def build_options(args: argparse.Namespace) -> UploadOptions:
    """Collect the upload options given on the command line."""
    return UploadOptions(
        access_policy=args.access_policy,
        metadata_is_public=args.metadata_is_public,
        referer_url=args.referer_url,
        app=args.app,
        title=args.title,
        desc=args.desc,
        created_at=args.created_at,
        collection_id=args.collection_id,
    )


def display_result(result: UploadResult) -> None:
    """Display the uploaded image's descriptor as a table."""
    table = Table(title="Gyazo Upload", show_header=False)
    table.add_column("Field", style="blue")
    table.add_column("Value")
    for key, value in asdict(result).items():
        table.add_row(key, value)
    console.print(table)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the upload script."""
    args = parse_arguments(argv)
    verbose_mode: bool = args.verbose

    try:
        settings = load_settings()
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if not settings.access_token:
        console.print(
            f"[red]Error: {ACCESS_TOKEN_VAR} not found in environment variables.[/red]"
        )
        console.print("Please create a .env file with your Gyazo access token:")
        console.print(f"{ACCESS_TOKEN_VAR}=your_access_token_here")
        sys.exit(1)

    timeout = args.timeout if args.timeout is not None else settings.timeout

    with GyazoUploader(
        settings.access_token,
        timeout=timeout,
        console=console if verbose_mode else None,
    ) as uploader:
        try:
            result = uploader.upload(args.image, build_options(args))
        except GyazoError as e:
            console.print(f"[red]Upload failed: {escape(str(e))}[/red]")
            if verbose_mode:
                console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
            sys.exit(1)

    if args.json:
        console.print_json(json.dumps(asdict(result)))
    else:
        console.print("[green]✓[/green] Image uploaded successfully")
        display_result(result)


if __name__ == "__main__":
    main()
