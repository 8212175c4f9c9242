"""Binary content detection for ingested files."""

import codecs


def is_binary_content(content: bytes, sample_size: int = 8192) -> bool:
    """Detect if content is binary rather than UTF-8 text.

    Args:
        content: Raw file content
        sample_size: Number of bytes to sample from the start

    Returns:
        True if the sample holds a null byte or is not valid UTF-8
    """
    if not content:
        return False

    sample = content[:sample_size]
    if b"\x00" in sample:
        return True

    # Incremental decode so a multi-byte sequence cut by the sample
    # boundary is not mistaken for garbage.
    decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
    try:
        decoder.decode(sample, final=len(sample) == len(content))
    except UnicodeDecodeError:
        return True
    return False


def decode_text(content: bytes) -> str:
    """Decode file bytes as UTF-8, dropping a leading BOM."""
    return content.decode("utf-8-sig", errors="replace")
