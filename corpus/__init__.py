"""Sentence corpus access for the cloze drill.

Provides the abstract corpus interface, the Tatoeba HTTP implementation, and
the batch fetcher that tops up short pages.
"""

from .base import CorpusClient
from .config import CorpusConfig, TATOEBA_SEARCH_URL
from .fetcher import BATCH_SIZE, fetch_batch
from .tatoeba import TatoebaClient, parse_response

__all__ = [
    # Abstract interface
    "CorpusClient",
    # Tatoeba implementation
    "TatoebaClient",
    "parse_response",
    # Configuration
    "CorpusConfig",
    "TATOEBA_SEARCH_URL",
    # Batching
    "fetch_batch",
    "BATCH_SIZE",
    # Factory functions
    "get_corpus_client",
]


def get_corpus_client(config: CorpusConfig | None = None) -> CorpusClient:
    """Get the default corpus client."""
    return TatoebaClient(config)
