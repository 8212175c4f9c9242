"""Protocol definitions for extensible components."""

from chunkpack.protocols.exporter import Exporter
from chunkpack.protocols.ingester import Ingester
from chunkpack.protocols.splitter import BlockSplitter

__all__ = ["Ingester", "Exporter", "BlockSplitter"]
