"""Batch fetching on top of a corpus that may return short pages."""

import logging

from corpus.base import CorpusClient
from errors import DecodeError, NetworkError
from models import Sentence

logger = logging.getLogger(__name__)

BATCH_SIZE = 10


def fetch_batch(
    client: CorpusClient,
    language_code: str,
    target_count: int = BATCH_SIZE,
) -> list[Sentence]:
    """Fetch a batch of sentences, topping up a short first page once.

    The first request's errors propagate. If it returns fewer than
    target_count sentences, one more request is made and its leading
    sentences fill the gap. A failing top-up request is logged and treated
    as returning nothing, so a persistently short corpus gives a short batch.

    Args:
        client: Corpus to query.
        language_code: Corpus code of the target language.
        target_count: Number of sentences wanted.

    Returns:
        At most target_count sentences, first-page results first.

    Raises:
        NetworkError: If the first request cannot reach the corpus.
        DecodeError: If the first response cannot be decoded.
    """
    sentences = client.search(language_code)[:target_count]

    missing = target_count - len(sentences)
    if missing <= 0:
        return sentences

    logger.info(
        "Got %d of %d sentences for %s, requesting %d more",
        len(sentences),
        target_count,
        language_code,
        missing,
    )
    try:
        extra = client.search(language_code)
    except (NetworkError, DecodeError) as e:
        logger.warning("Top-up request for %s failed, keeping short batch: %s", language_code, e)
        extra = []

    sentences.extend(extra[:missing])
    return sentences
