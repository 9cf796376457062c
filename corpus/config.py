"""Configuration for the corpus client."""

from pydantic import BaseModel, Field

TATOEBA_SEARCH_URL = "https://tatoeba.org/en/api_v0/search"


class CorpusConfig(BaseModel):
    """Connection settings and fixed query parameters for corpus searches."""

    base_url: str = TATOEBA_SEARCH_URL
    source_language: str = "eng"
    timeout: float = Field(default=10.0, gt=0)
    sort: str = "random"
    orphans: str = "no"
    unapproved: str = "no"

    def query_params(self, language_code: str) -> dict[str, str]:
        """Query string parameters for a search into the given language."""
        return {
            "from": self.source_language,
            "orphans": self.orphans,
            "sort": self.sort,
            "to": language_code,
            "unapproved": self.unapproved,
        }
