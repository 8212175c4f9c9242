"""Extension allow-list for files chunkpack will accept."""

from pathlib import Path

SUPPORTED_EXTENSIONS = {
    # C family
    ".c", ".cpp", ".cc", ".cxx", ".h", ".hpp", ".cs",
    # Scripting
    ".py", ".pyw", ".rb", ".php", ".ps1", ".psm1", ".psd1",
    ".sh", ".bash", ".zsh", ".bat", ".cmd",
    # JS / TS
    ".js", ".jsx", ".ts", ".tsx",
    # JVM, Go, Rust, Swift
    ".java", ".kt", ".kts", ".go", ".rs", ".swift",
    # Web
    ".html", ".htm", ".css", ".scss", ".sass",
    # Data
    ".xml", ".json", ".jsonl", ".ndjson", ".yaml", ".yml", ".sql",
    # Prose and logs
    ".md", ".txt", ".log",
}


def extension_of(name: str | Path) -> str:
    """Lower-cased extension of a file name, including the dot."""
    return Path(name).suffix.lower()


def is_supported_extension(name: str | Path) -> bool:
    """Check a file name against the allow-list (case-insensitive)."""
    return extension_of(name) in SUPPORTED_EXTENSIONS
