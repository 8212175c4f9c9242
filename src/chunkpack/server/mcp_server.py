"""FastMCP server implementation for chunkpack."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from chunkpack.classifier import classify as classify_content
from chunkpack.ingesters.records import DEFAULT_MAX_FILE_SIZE
from chunkpack.packer import SizePacker
from chunkpack.pipeline import SplitResult, split_file
from chunkpack.utils.binary import decode_text, is_binary_content


def load_text(root: Path, path: str, max_file_size: int = DEFAULT_MAX_FILE_SIZE) -> str:
    """Read a text file below ``root``.

    Raises:
        ValueError: If the path escapes root, is missing, too large or binary
    """
    root = root.resolve()
    full_path = (root / path).resolve()
    if not full_path.is_relative_to(root):
        raise ValueError(f"Path escapes served folder: {path}")
    if not full_path.is_file():
        raise ValueError(f"File not found: {path}")
    if full_path.stat().st_size > max_file_size:
        raise ValueError(f"File too large: {path}")

    raw = full_path.read_bytes()
    if is_binary_content(raw):
        raise ValueError(f"Binary file: {path}")
    return decode_text(raw)


def format_split(result: SplitResult) -> str:
    """Summary listing of a split: kind, then one line per chunk."""
    lines = [f"{result.file_path}: {result.kind.value}, {len(result.chunks)} chunks"]
    for chunk in result.chunks:
        lines.append(
            f"  [{chunk.chunk_index}] lines {chunk.start_line + 1}-{chunk.end_line}"
            f"  {chunk.size_bytes} bytes"
        )
    return "\n".join(lines)


def select_chunk(result: SplitResult, index: int) -> str:
    """Text of one chunk, or an error line if the index is out of range."""
    if not result.chunks:
        return f"Error: {result.file_path} is empty"
    if not 0 <= index < len(result.chunks):
        return f"Error: chunk {index} out of range (0-{len(result.chunks) - 1})"
    return result.chunks[index].text


def create_mcp_server(
    root: Path,
    max_bytes: int = SizePacker.DEFAULT_MAX_BYTES,
    max_file_size: int = DEFAULT_MAX_FILE_SIZE,
) -> FastMCP:
    """Create an MCP server over the files below ``root``.

    Design: 1 process = 1 folder. Tools only ever read files inside it.

    Args:
        root: Folder whose files the tools may read
        max_bytes: Chunk budget used when a tool call gives none
        max_file_size: Files larger than this are refused

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="chunkpack",
    )

    def run_split(path: str, budget: int | None) -> SplitResult:
        content = load_text(root, path, max_file_size)
        return split_file(content, path, budget if budget is not None else max_bytes)

    @mcp.tool()
    def classify(path: str) -> str:
        """Detect the content kind of a file.

        Args:
            path: Path relative to the served folder

        Returns:
            One of: powershell, python, js, json, ndjson, cstyle, ruby,
            markdown, log, yaml, xml, html, text
        """
        try:
            return classify_content(path, load_text(root, path, max_file_size)).value
        except ValueError as e:
            return f"Error: {e}"

    @mcp.tool()
    def split(path: str, max_bytes: int | None = None) -> str:
        """Split a file into byte-bounded chunks and list them.

        Use read_chunk to fetch the text of one chunk.

        Args:
            path: Path relative to the served folder
            max_bytes: Maximum UTF-8 bytes per chunk (default: server setting)

        Returns:
            The detected kind and one line per chunk with its size and line range
        """
        try:
            return format_split(run_split(path, max_bytes))
        except ValueError as e:
            return f"Error: {e}"

    @mcp.tool()
    def read_chunk(path: str, index: int, max_bytes: int | None = None) -> str:
        """Read one chunk of a file.

        Args:
            path: Path relative to the served folder
            index: 0-based chunk index as listed by split
            max_bytes: Must match the budget used with split

        Returns:
            The chunk text
        """
        try:
            return select_chunk(run_split(path, max_bytes), index)
        except ValueError as e:
            return f"Error: {e}"

    return mcp
