"""Language name lookup for the sentence corpus.

Maps English language names to the ISO 639-3 codes the corpus uses, and
classifies each language's script once, when it is resolved.
"""

from types import MappingProxyType
from typing import Mapping
from urllib.parse import quote

from errors import InvalidLanguage
from models import Language, ScriptKind

WIKTIONARY_URL = "https://en.wiktionary.org/wiki/"

# Languages written without spaces between words. Every character is a unit.
NON_SPACED_CODES = frozenset(
    {"cmn", "lzh", "hak", "cjy", "nan", "hsn", "gan", "jpn", "tha", "khm", "lao", "mya"}
)

# Wiktionary section headings for codes whose display name differs from the
# heading. The Chinese varieties share one "Chinese" section.
WIKTIONARY_SECTIONS = MappingProxyType(
    {
        "cmn": "Chinese",
        "lzh": "Chinese",
        "yue": "Chinese",
        "hak": "Chinese",
        "cjy": "Chinese",
        "nan": "Chinese",
        "hsn": "Chinese",
        "gan": "Chinese",
        "nob": "Norwegian Bokmål",
        "fry": "West Frisian",
    }
)

# The first name listed for a code is the one used for display and lookups.
DEFAULT_LANGUAGES: tuple[tuple[str, str], ...] = (
    ("afrikaans", "afr"),
    ("albanian", "sqi"),
    ("arabic", "ara"),
    ("armenian", "hye"),
    ("azerbaijani", "aze"),
    ("basque", "eus"),
    ("belarusian", "bel"),
    ("bengali", "ben"),
    ("berber", "ber"),
    ("bosnian", "bos"),
    ("breton", "bre"),
    ("bulgarian", "bul"),
    ("burmese", "mya"),
    ("cantonese", "yue"),
    ("catalan", "cat"),
    ("chinese", "cmn"),
    ("mandarin", "cmn"),
    ("mandarin chinese", "cmn"),
    ("literary chinese", "lzh"),
    ("hakka chinese", "hak"),
    ("hakka", "hak"),
    ("jin chinese", "cjy"),
    ("min nan chinese", "nan"),
    ("min nan", "nan"),
    ("xiang chinese", "hsn"),
    ("gan chinese", "gan"),
    ("croatian", "hrv"),
    ("czech", "ces"),
    ("danish", "dan"),
    ("dutch", "nld"),
    ("english", "eng"),
    ("esperanto", "epo"),
    ("estonian", "est"),
    ("faroese", "fao"),
    ("finnish", "fin"),
    ("french", "fra"),
    ("frisian", "fry"),
    ("galician", "glg"),
    ("georgian", "kat"),
    ("german", "deu"),
    ("greek", "ell"),
    ("hebrew", "heb"),
    ("hindi", "hin"),
    ("hungarian", "hun"),
    ("icelandic", "isl"),
    ("indonesian", "ind"),
    ("interlingua", "ina"),
    ("irish", "gle"),
    ("italian", "ita"),
    ("japanese", "jpn"),
    ("kabyle", "kab"),
    ("kazakh", "kaz"),
    ("khmer", "khm"),
    ("klingon", "tlh"),
    ("korean", "kor"),
    ("kurdish", "kur"),
    ("lao", "lao"),
    ("latin", "lat"),
    ("latvian", "lvs"),
    ("lithuanian", "lit"),
    ("lojban", "jbo"),
    ("luxembourgish", "ltz"),
    ("macedonian", "mkd"),
    ("malay", "zsm"),
    ("maori", "mri"),
    ("marathi", "mar"),
    ("mongolian", "mon"),
    ("norwegian", "nob"),
    ("norwegian bokmal", "nob"),
    ("occitan", "oci"),
    ("persian", "pes"),
    ("polish", "pol"),
    ("portuguese", "por"),
    ("romanian", "ron"),
    ("russian", "rus"),
    ("serbian", "srp"),
    ("slovak", "slk"),
    ("slovenian", "slv"),
    ("spanish", "spa"),
    ("swahili", "swh"),
    ("swedish", "swe"),
    ("tagalog", "tgl"),
    ("tamil", "tam"),
    ("tatar", "tat"),
    ("telugu", "tel"),
    ("thai", "tha"),
    ("toki pona", "tok"),
    ("turkish", "tur"),
    ("ukrainian", "ukr"),
    ("urdu", "urd"),
    ("uyghur", "uig"),
    ("uzbek", "uzb"),
    ("vietnamese", "vie"),
    ("welsh", "cym"),
    ("yiddish", "yid"),
)


def classify_script(code: str) -> ScriptKind:
    """Get the script kind for a corpus language code."""
    if code in NON_SPACED_CODES:
        return ScriptKind.UNIT_PER_CHARACTER
    return ScriptKind.SPACE_DELIMITED


class LanguageTable:
    """Read-only mapping of language names to corpus codes."""

    def __init__(self, entries: Mapping[str, str]):
        self._codes = MappingProxyType(
            {name.strip().lower(): code for name, code in entries.items()}
        )
        names: dict[str, str] = {}
        for name, code in self._codes.items():
            names.setdefault(code, name)
        self._names = MappingProxyType(names)

    @classmethod
    def default(cls) -> "LanguageTable":
        return cls(dict(DEFAULT_LANGUAGES))

    @property
    def codes(self) -> Mapping[str, str]:
        return self._codes

    def resolve(self, name: str) -> Language:
        """Resolve a user-supplied language name.

        Args:
            name: Language name in any case, surrounding whitespace ignored.

        Returns:
            The language with its code and script classification.

        Raises:
            InvalidLanguage: If the name is not in the table.
        """
        key = name.strip().lower()
        code = self._codes.get(key)
        if code is None:
            raise InvalidLanguage(name.strip())
        return Language(name=key, code=code, script=classify_script(code))

    def name_for(self, code: str) -> str | None:
        """Reverse lookup of the display name for a code."""
        return self._names.get(code)

    def wiktionary_url(self, word: str, code: str) -> str:
        """Build the Wiktionary URL for a word, anchored at the language section."""
        section = WIKTIONARY_SECTIONS.get(code)
        if section is None:
            section = (self.name_for(code) or code).title()
        return f"{WIKTIONARY_URL}{quote(word.strip())}#{quote(section.replace(' ', '_'))}"
