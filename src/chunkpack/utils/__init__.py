"""Utility functions for chunkpack."""

from chunkpack.utils.binary import decode_text, is_binary_content
from chunkpack.utils.extensions import (
    SUPPORTED_EXTENSIONS,
    extension_of,
    is_supported_extension,
)
from chunkpack.utils.lines import byte_size, is_blank, joined_size, split_lines

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "byte_size",
    "decode_text",
    "extension_of",
    "is_binary_content",
    "is_blank",
    "is_supported_extension",
    "joined_size",
    "split_lines",
]
