"""CLI entry point for chunkpack."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator

from chunkpack.exporters import ZipExporter, chunk_payloads, get_exporter
from chunkpack.ingesters import DEFAULT_MAX_FILE_SIZE, get_ingester
from chunkpack.models import Document, Payload
from chunkpack.packer import SizePacker
from chunkpack.pipeline import split_document
from chunkpack.transforms import convert_to_text, merge_files

logger = logging.getLogger(__name__)


def _documents(source: str, max_file_size: int, all_extensions: bool) -> Iterator[Document]:
    """Ingest a source or exit with an error."""
    source_path = Path(source)
    if not source_path.exists():
        logger.error(f"Source not found: {source}")
        sys.exit(1)

    ingester = get_ingester(
        source_path,
        max_file_size=max_file_size,
        supported_only=not all_extensions,
    )
    if ingester is None:
        logger.error(f"Cannot process: {source}")
        logger.error("Supported inputs: files, folders, .zip files")
        sys.exit(1)

    logger.debug(f"Ingester: {ingester.source_type}")
    return ingester.ingest(source_path)


def _export(payloads: list[Payload], output: str) -> int:
    exporter = get_exporter(output)
    if exporter is None:
        logger.error(f"Unsupported output: {output}")
        sys.exit(1)
    return exporter.export(payloads, Path(output))


def split(
    source: str,
    output: str,
    max_bytes: int = SizePacker.DEFAULT_MAX_BYTES,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    all_extensions: bool = False,
) -> None:
    """Split every text file of a source into chunk files.

    Args:
        source: Path to a file, folder or zip file
        output: Output folder, or a .zip path for a single bundle
        max_bytes: UTF-8 byte ceiling per chunk
        max_file_size: Skip input files larger than this
        all_extensions: Accept files outside the extension allow-list
    """
    if max_bytes <= 0:
        logger.error(f"--max-bytes must be positive, got {max_bytes}")
        sys.exit(1)

    file_count = 0
    payloads: list[Payload] = []

    for doc in _documents(source, max_file_size, all_extensions):
        result = split_document(doc, max_bytes)
        if result is None:
            logger.info(f"  {doc.name}  [binary, skipped]")
            continue
        file_count += 1
        payloads.extend(chunk_payloads(result.chunks))
        logger.info(f"  {doc.name}  {result.kind.value}, {len(result.chunks)} chunks")

    written = _export(payloads, output)
    logger.info("")
    logger.info(f"Split {file_count} files into {written} chunks -> {output}")


def classify(source: str, max_file_size: int = DEFAULT_MAX_FILE_SIZE, all_extensions: bool = False) -> None:
    """Print the detected kind of every text file in a source."""
    from chunkpack.classifier import classify as classify_content

    for doc in _documents(source, max_file_size, all_extensions):
        if doc.content is None:
            print(f"{'binary':<12}{doc.name}")
            continue
        print(f"{classify_content(doc.name, doc.content).value:<12}{doc.name}")


def merge(
    source: str,
    output: str,
    add_headers: bool = True,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    all_extensions: bool = False,
) -> None:
    """Merge every text file of a source into one file."""
    files = [
        Payload(name=doc.name, content=doc.content)
        for doc in _documents(source, max_file_size, all_extensions)
        if doc.content is not None
    ]
    merged = merge_files(files, add_headers=add_headers)

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(merged, encoding="utf-8", newline="")
    logger.info(f"Merged {len(files)} files -> {output_path}")


def convert(
    source: str,
    output: str,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    all_extensions: bool = False,
) -> None:
    """Export every text file of a source renamed to .txt."""
    payloads = [
        convert_to_text(doc.name, doc.content)
        for doc in _documents(source, max_file_size, all_extensions)
        if doc.content is not None
    ]
    written = _export(payloads, output)
    logger.info(f"Converted {written} files -> {output}")


def serve(root: str, max_bytes: int, transport: str = "stdio") -> None:
    """Start MCP server over a folder of files.

    Args:
        root: Folder whose files the tools may read
        max_bytes: Default chunk budget for the tools
        transport: Transport protocol (stdio or sse)
    """
    root_path = Path(root)
    if not root_path.is_dir():
        logger.error(f"Folder not found: {root}")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from chunkpack.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {root} via {transport}")
    mcp = create_mcp_server(root_path, max_bytes=max_bytes)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def deck() -> None:
    """Launch the Flight Deck TUI for interactive splitting."""
    from chunkpack.flight_deck import main as flight_deck_main

    flight_deck_main()


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("source", help="Input file, folder or zip file path")
    parser.add_argument(
        "--max-file-size",
        type=int,
        default=DEFAULT_MAX_FILE_SIZE,
        help=f"Skip input files larger than this many bytes (default: {DEFAULT_MAX_FILE_SIZE})",
    )
    parser.add_argument(
        "--all-extensions",
        action="store_true",
        help="Also read files outside the supported extension list",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chunkpack",
        description="chunkpack - split files into byte-bounded, semantically coherent chunks",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # split command
    split_parser = subparsers.add_parser(
        "split",
        help="Split files into chunk files",
    )
    _add_source_options(split_parser)
    split_parser.add_argument(
        "-m",
        "--max-bytes",
        type=int,
        default=SizePacker.DEFAULT_MAX_BYTES,
        help=f"Maximum UTF-8 bytes per chunk (default: {SizePacker.DEFAULT_MAX_BYTES})",
    )
    split_parser.add_argument(
        "-o",
        "--output",
        default="chunks",
        help="Output folder, or a .zip path for one archive (default: chunks)",
    )

    # classify command
    classify_parser = subparsers.add_parser(
        "classify",
        help="Show the detected content kind of each file",
    )
    _add_source_options(classify_parser)

    # merge command
    merge_parser = subparsers.add_parser(
        "merge",
        help="Merge files into one text file",
    )
    _add_source_options(merge_parser)
    merge_parser.add_argument(
        "-o",
        "--output",
        default="merged.txt",
        help="Output file path (default: merged.txt)",
    )
    merge_parser.add_argument(
        "--no-headers",
        action="store_true",
        help="Do not write a '----- name -----' line before each file",
    )

    # convert command
    convert_parser = subparsers.add_parser(
        "convert",
        help="Copy files renamed to .txt",
    )
    _add_source_options(convert_parser)
    convert_parser.add_argument(
        "-o",
        "--output",
        default=ZipExporter.DEFAULT_NAME,
        help=f"Output folder or .zip path (default: {ZipExporter.DEFAULT_NAME})",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server over a folder",
    )
    serve_parser.add_argument("root", help="Folder to expose")
    serve_parser.add_argument(
        "-m",
        "--max-bytes",
        type=int,
        default=SizePacker.DEFAULT_MAX_BYTES,
        help=f"Default chunk budget (default: {SizePacker.DEFAULT_MAX_BYTES})",
    )
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    # deck command
    subparsers.add_parser(
        "deck",
        help="Launch Flight Deck TUI",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    if args.command == "split":
        split(args.source, args.output, args.max_bytes, args.max_file_size, args.all_extensions)
    elif args.command == "classify":
        classify(args.source, args.max_file_size, args.all_extensions)
    elif args.command == "merge":
        merge(args.source, args.output, not args.no_headers, args.max_file_size, args.all_extensions)
    elif args.command == "convert":
        convert(args.source, args.output, args.max_file_size, args.all_extensions)
    elif args.command == "serve":
        serve(args.root, args.max_bytes, args.transport)
    elif args.command == "deck":
        deck()


if __name__ == "__main__":
    main()
