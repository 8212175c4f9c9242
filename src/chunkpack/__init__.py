"""chunkpack - split files into byte-bounded, semantically coherent chunks."""

from chunkpack.classifier import KindClassifier, classify
from chunkpack.models import Block, Chunk, Kind
from chunkpack.packer import SizePacker, pack_blocks
from chunkpack.pipeline import SplitResult, split_file

__version__ = "0.1.0"

__all__ = [
    "Block",
    "Chunk",
    "Kind",
    "KindClassifier",
    "SizePacker",
    "SplitResult",
    "classify",
    "pack_blocks",
    "split_file",
]
