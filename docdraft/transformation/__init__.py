from docdraft.transformation.assembler import ResultAssembler
from docdraft.transformation.chunk_processor import ChunkProcessor
from docdraft.transformation.chunker import ContentChunker
from docdraft.transformation.client_base import BaseCompletionClient
from docdraft.transformation.small_document import SmallDocumentProcessor
from docdraft.transformation.tokens import estimate_tokens

__all__ = [
    "BaseCompletionClient",
    "ChunkProcessor",
    "ContentChunker",
    "ResultAssembler",
    "SmallDocumentProcessor",
    "estimate_tokens",
]
