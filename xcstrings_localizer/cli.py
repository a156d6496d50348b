"""Command-line interface for the localizer."""

import asyncio
from typing import Optional, Tuple

import click
from rich.console import Console

from . import __version__
from .config import MISSING_API_KEY, config
from .extraction.xcstrings_parser import InvalidDocumentError
from .reporting import Reporter
from .review import AutoDecisionProvider, ConsoleDecisionProvider, Decision
from .translation.clients.openai_client import OpenAIClient
from .translation.translator import XCStringsLocalizer

console = Console(stderr=True)

API_KEY_HELP = """Set it using one of these methods:
1. Create a .env file: echo "OPENAI_API_KEY='your-key'" > .env
2. Environment variable: export OPENAI_API_KEY='your-key'
3. Command line flag: --api-key 'your-key'

Get your API key from: https://platform.openai.com/api-keys"""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    help="Output file path (defaults to input file)"
)
@click.option(
    "--keys", "-k",
    multiple=True,
    help="Specific keys to translate (can be specified multiple times)"
)
@click.option(
    "--language", "-l",
    "languages",
    multiple=True,
    help="Specific languages to process (can be specified multiple times, e.g., fr, de, es)"
)
@click.option(
    "--force", "-f",
    is_flag=True,
    help="Force re-translation of already translated strings"
)
@click.option(
    "--dry-run", "-d",
    is_flag=True,
    help="Preview what would be translated without making changes"
)
@click.option(
    "--suggest", "-s",
    is_flag=True,
    help="Analyze existing translations and suggest improvements (interactive)"
)
@click.option(
    "--model", "-m",
    default=config.openai_model,
    show_default=True,
    help="OpenAI model to use for translation"
)
@click.option(
    "--api-key",
    default=None,
    help="OpenAI API key (or set OPENAI_API_KEY environment variable)"
)
@click.option(
    "--batch-size",
    type=click.IntRange(min=1),
    default=None,
    help="Number of strings sent per request [default: XCSTRINGS_BATCH_SIZE or 15]"
)
@click.option(
    "--auto-decision",
    type=click.Choice(["accept", "reject"]),
    default=None,
    help="Answer every suggestion without prompting (with --suggest)"
)
@click.pass_context
def main(
    ctx: click.Context,
    input_file: str,
    output_path: Optional[str],
    keys: Tuple[str, ...],
    languages: Tuple[str, ...],
    force: bool,
    dry_run: bool,
    suggest: bool,
    model: str,
    api_key: Optional[str],
    batch_size: Optional[int],
    auto_decision: Optional[str],
):
    """Localize Xcode .xcstrings files using AI translation.

    Translates every string that is missing a translation in the target
    languages of INPUT_FILE, respecting shouldTranslate flags and using
    comments as translation context. With --suggest, existing translations
    are reviewed instead and each improvement can be accepted or rejected.
    """
    reporter = Reporter(console)

    # Suggest mode always talks to the service, even on a dry run
    errors = config.validate(api_key, require_api_key=suggest or not dry_run)
    if errors:
        reporter.error("Configuration errors:")
        for error in errors:
            reporter.detail(f"  - {error}")
        if MISSING_API_KEY in errors:
            console.print(API_KEY_HELP)
        ctx.exit(1)

    resolved_key = config.resolve_api_key(api_key)

    if config.app_description:
        reporter.detail(f"Using app context: {config.app_description[:60]}...")

    if not input_file.endswith(".xcstrings"):
        reporter.warning("Warning: Input file doesn't have .xcstrings extension")

    client = None
    if resolved_key:
        client = OpenAIClient(
            api_key=resolved_key,
            model=model,
            app_description=config.app_description,
        )
    localizer = XCStringsLocalizer(
        client, reporter=reporter, batch_size=batch_size or config.batch_size
    )

    try:
        if suggest:
            if auto_decision:
                provider = AutoDecisionProvider(Decision(auto_decision))
            else:
                provider = ConsoleDecisionProvider(reporter)
            asyncio.run(
                localizer.suggest_improvements(
                    input_file,
                    provider,
                    output_path=output_path,
                    keys=list(keys) or None,
                    languages=list(languages) or None,
                    dry_run=dry_run,
                )
            )
            return

        stats = asyncio.run(
            localizer.localize(
                input_file,
                output_path=output_path,
                keys=list(keys) or None,
                languages=list(languages) or None,
                force=force,
                dry_run=dry_run,
            )
        )
    except InvalidDocumentError as e:
        reporter.error("Error: Invalid document")
        reporter.detail(str(e))
        ctx.exit(1)
    except OSError as e:
        reporter.error(f"Error: {e}")
        ctx.exit(1)

    reporter.success("\n✓ Localization complete!")
    if stats.has_errors:
        ctx.exit(1)


if __name__ == "__main__":
    main()
