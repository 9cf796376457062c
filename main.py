import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cloze import DrillConfig, SplitStrategy
from corpus import CorpusConfig, get_corpus_client
from errors import ClozeError
from languages import LanguageTable
from models import Direction
from session import DrillSession
from ui import DrillUI
from ui.styles import DEFAULT_THEME

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Minicloze - fill in the missing word of real example sentences"
    )
    parser.add_argument(
        "language",
        nargs="?",
        default=None,
        help="Language to study, e.g. 'french' (asked for if omitted)",
    )
    parser.add_argument(
        "direction",
        nargs="?",
        choices=[Direction.INVERSE.value],
        default=None,
        help="Pass 'inverse' to fill in the English sentence instead",
    )
    parser.add_argument(
        "--inverse",
        action="store_true",
        help="Same as the 'inverse' positional argument",
    )
    parser.add_argument(
        "--count",
        "-c",
        type=int,
        default=10,
        help="Sentences per batch (default: 10)",
    )
    parser.add_argument(
        "--timeout",
        "-t",
        type=float,
        default=10.0,
        help="Corpus request timeout in seconds (default: 10)",
    )
    parser.add_argument(
        "--split-strategy",
        choices=[strategy.value for strategy in SplitStrategy],
        default=SplitStrategy.INDEX.value,
        help="Where the gap is cut: at the chosen word's position (index) "
        "or at the first occurrence of its text (first_occurrence)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print debug logging",
    )
    return parser


def configure_logging(verbose: bool = False) -> None:
    """Send log records through rich, at DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=verbose)],
        force=True,
    )


def build_configs(args: argparse.Namespace) -> tuple[DrillConfig, CorpusConfig]:
    """Build configuration models from parsed arguments.

    Raises:
        ValidationError: If an option is out of range.
    """
    drill_config = DrillConfig(
        batch_size=args.count,
        split_strategy=SplitStrategy(args.split_strategy),
    )
    corpus_config = CorpusConfig(timeout=args.timeout)
    return drill_config, corpus_config


def get_direction(args: argparse.Namespace) -> Direction:
    if args.inverse or args.direction == Direction.INVERSE.value:
        return Direction.INVERSE
    return Direction.NORMAL


def run_interactive(
    ui: DrillUI,
    language_name: str | None,
    direction: Direction,
    drill_config: DrillConfig,
    corpus_config: CorpusConfig,
) -> None:
    """Run the interactive drill until the learner stops."""
    ui.clear_screen()
    languages = LanguageTable.default()

    language = languages.resolve(language_name or ui.ask_language())
    logger.info("Studying %s (%s), %s direction", language.name, language.code, direction.value)

    ui.show_welcome(language.name, language.code, direction == Direction.INVERSE)

    client = get_corpus_client(corpus_config)
    session = DrillSession(
        client=client,
        language=language,
        languages=languages,
        ui=ui,
        config=drill_config,
        direction=direction,
    )
    try:
        session.run()
    finally:
        client.close()
    ui.wait_for_exit()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        drill_config, corpus_config = build_configs(args)
    except ValidationError as e:
        parser.error(f"invalid option: {e.errors()[0]['msg']}")

    ui = DrillUI(Console(theme=DEFAULT_THEME))

    try:
        run_interactive(
            ui,
            args.language,
            get_direction(args),
            drill_config,
            corpus_config,
        )
    except ClozeError as e:
        logger.debug("Fatal error", exc_info=True)
        ui.show_error(str(e))
        return 1
    except (KeyboardInterrupt, EOFError):
        ui.show_goodbye()
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())
