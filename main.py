"""
Markdown Tag Finder - find Markdown formatting tags in every line of a file.
"""

from __future__ import annotations

import argparse
import io
import json
import logging
import sys
from typing import List, Optional, TextIO

from internal.config.manager import ConfigManager
from lib.logging_utils import initLogging
from lib.markdown import MarkdownTagFinder, Tag

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "text")


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Markdown Tag Finder - print formatting tags found in each line of a Markdown file"
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Markdown file to scan (default: read from stdin)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: taken from config, json if not set)",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit",
    )
    return parser.parse_args(argv)


def formatLine(lineNumber: int, tags: List[Tag], outputFormat: str) -> str:
    """Format tags of a single line for output."""
    if outputFormat == "json":
        return json.dumps({"line": lineNumber, "tags": [tag.toDict() for tag in tags]}, ensure_ascii=False)

    tagsStr = " ".join(f"{tag.kind.value}[{tag.start}:{tag.end}]" for tag in tags)
    return f"{lineNumber}: {tagsStr}".rstrip()


def processStream(stream: TextIO, out: TextIO, outputFormat: str, finder: Optional[MarkdownTagFinder] = None) -> int:
    """
    Scan every line of the stream and write formatted tags to out.

    Returns:
        Number of lines processed
    """
    if outputFormat not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format: {outputFormat}")
    if finder is None:
        finder = MarkdownTagFinder()

    lineCount = 0
    for lineCount, line in enumerate(stream, start=1):
        tags = finder.findTags(line.rstrip("\r\n"))
        out.write(formatLine(lineCount, tags, outputFormat) + "\n")

    logger.info(f"Processed {lineCount} lines")
    return lineCount


def prettyPrintConfig(configManager: ConfigManager):
    """Pretty-print the loaded configuration."""
    print("=== Markdown Tag Finder Configuration ===")
    print()
    print(json.dumps(configManager.config, indent=2, ensure_ascii=False, sort_keys=True, default=str))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    configManager = ConfigManager(args.config, args.config_dir)
    if args.print_config:
        prettyPrintConfig(configManager)
        return 0

    initLogging(configManager.getLoggingConfig())
    taggerConfig = configManager.getTaggerConfig()
    outputFormat = args.format or taggerConfig["format"]
    if outputFormat not in OUTPUT_FORMATS:
        logger.error(f"Unknown output format '{outputFormat}' in config, expected one of {OUTPUT_FORMATS}")
        return 1

    encoding = taggerConfig["encoding"]
    try:
        if args.file == "-":
            stdin = io.TextIOWrapper(sys.stdin.buffer, encoding=encoding)
            try:
                processStream(stdin, sys.stdout, outputFormat)
            finally:
                # Leave sys.stdin usable
                stdin.detach()
        else:
            with open(args.file, "rt", encoding=encoding) as f:
                processStream(f, sys.stdout, outputFormat)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.error(f"Failed to read {args.file} with encoding {encoding}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
