"""
Command-line interface for diario-mood.

Provides commands to analyze diary text and summarize moods
across many entries.

Usage:
    diario-mood analyze "Hoy fue un día excelente"   # Analyze one text
    diario-mood batch entries.txt                    # One entry per line
    diario-mood stats entries.txt                    # Mood distribution
"""

import json
from typing import Any, TextIO

import click

from src.observability.logging import bind_context, clear_context, get_logger, setup_logging
from src.sentiment.config import SentimentConfig
from src.sentiment.service import MoodAnalyzer

logger = get_logger(__name__)


def _read_entries(source: TextIO) -> list[str]:
    """Read one entry per non-blank line."""
    return [line.strip() for line in source if line.strip()]


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _make_analyzer(min_words: int | None) -> MoodAnalyzer:
    config = SentimentConfig() if min_words is None else SentimentConfig(min_words=min_words)
    return MoodAnalyzer(config=config)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, debug: bool) -> None:
    """Diario Mood - mood detection for Spanish diary entries."""
    setup_logging("DEBUG" if debug else None)

    clear_context()
    bind_context(command=ctx.invoked_subcommand)


@main.command()
@click.argument("text")
@click.option(
    "--sensitivity",
    type=click.Choice(["low", "medium", "high"]),
    default=None,
    help="Sensitivity preset for the apply decision",
)
@click.option("--min-words", type=click.IntRange(min=1), default=None, help="Minimum word count")
@click.option("--json", "as_json", is_flag=True, help="Print the full result as JSON")
def analyze(text: str, sensitivity: str | None, min_words: int | None, as_json: bool) -> None:
    """Analyze the mood of TEXT."""
    bind_context(sensitivity=sensitivity)

    analyzer = _make_analyzer(min_words)
    result = analyzer.analyze(text)
    apply = analyzer.should_apply_mood(result, sensitivity)
    logger.debug("Apply decision", mood=result.mood, confidence=result.confidence, apply=apply)

    if as_json:
        payload = result.to_dict()
        payload["apply"] = apply
        _echo_json(payload)
        return

    click.echo(f"Mood: {result.mood}")
    click.echo(f"  score: {result.score}")
    click.echo(f"  confidence: {result.confidence}")
    click.echo(f"  words: {result.word_count}")

    detected = {name: value for name, value in result.emotions.items() if value > 0}
    if detected:
        click.echo("  emotions: " + ", ".join(f"{k}={v:.2f}" for k, v in detected.items()))

    if apply:
        click.echo(click.style("Mood would be applied", fg="green"))
    else:
        click.echo(click.style("Confidence too low to apply mood", fg="yellow"))


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--min-words", type=click.IntRange(min=1), default=None, help="Minimum word count")
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
def batch(source: TextIO, min_words: int | None, as_json: bool) -> None:
    """Analyze every line of SOURCE ('-' for stdin)."""
    entries = _read_entries(source)
    if not entries:
        raise click.UsageError("No entries to analyze")
    bind_context(entries=len(entries))

    items = _make_analyzer(min_words).analyze_batch(entries)
    logger.info("Batch analyzed", results=len(items))

    if as_json:
        _echo_json([item.to_dict() for item in items])
        return

    for item in items:
        result = item.result
        click.echo(f"{result.mood}  {result.score:+.3f}  ({result.confidence:.3f})  {item.text}")


@main.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option("--min-words", type=click.IntRange(min=1), default=None, help="Minimum word count")
@click.option("--json", "as_json", is_flag=True, help="Print statistics as JSON")
def stats(source: TextIO, min_words: int | None, as_json: bool) -> None:
    """Summarize moods across every line of SOURCE."""
    entries = _read_entries(source)
    bind_context(entries=len(entries))

    statistics = _make_analyzer(min_words).get_statistics(entries)
    if statistics is None:
        raise click.UsageError("No entries to analyze")
    logger.info("Statistics computed", most_common=statistics.most_common_sentiment)

    if as_json:
        _echo_json(statistics.to_dict())
        return

    click.echo("\nMood Statistics:")
    click.echo("-" * 40)
    click.echo(f"  total: {statistics.total}")
    click.echo(f"  average score: {statistics.average_score}")
    for mood, count in statistics.sentiment_distribution.items():
        click.echo(f"  {mood}: {count}")
    click.echo("-" * 40)
    click.echo(f"Most common: {statistics.most_common_sentiment}")


if __name__ == "__main__":
    main()
