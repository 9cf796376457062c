"""HTTP client for the Tatoeba sentence search API."""

import json
import logging

import requests
from pydantic import ValidationError

from corpus.base import CorpusClient
from corpus.config import CorpusConfig
from errors import DecodeError, NetworkError
from models import CorpusResponse, Sentence

logger = logging.getLogger(__name__)


def parse_response(body: str) -> list[Sentence]:
    """Parse a search response body into sentences.

    Raises:
        DecodeError: With the line and column of malformed JSON, or the path
            of the first field that does not match the expected records.
    """
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise DecodeError(f"line {e.lineno} column {e.colno}", e.msg) from e

    try:
        return CorpusResponse.model_validate(payload).results
    except ValidationError as e:
        first = e.errors()[0]
        position = ".".join(str(part) for part in first["loc"]) or "<root>"
        raise DecodeError(position, first["msg"]) from e


class TatoebaClient(CorpusClient):
    """Client for the Tatoeba search endpoint."""

    def __init__(
        self,
        config: CorpusConfig | None = None,
        session: requests.Session | None = None,
    ):
        self.config = config or CorpusConfig()
        self.session = session or requests.Session()

    def search(self, language_code: str) -> list[Sentence]:
        """Request one page of random sentences translated into a language."""
        params = self.config.query_params(language_code)
        logger.debug("Searching %s for language %s", self.config.base_url, language_code)

        try:
            response = self.session.get(
                self.config.base_url, params=params, timeout=self.config.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Could not reach {self.config.base_url}: {e}") from e

        sentences = parse_response(response.text)
        logger.debug("Corpus returned %d sentences for %s", len(sentences), language_code)
        return sentences

    def close(self) -> None:
        self.session.close()
