"""Command-line front end: extract, highlight and hit-test entities."""

import json

import click

from activelabel import __version__
from activelabel.config import configure_logging, get_settings
from activelabel.core.exceptions import ActiveLabelError
from activelabel.core.models import DETECTABLE_CATEGORIES, ActiveEntity, EntityCategory
from activelabel.extraction import FilterPredicate, extract, resolve_overlaps
from activelabel.services import ActiveText
from activelabel.utils.utf16 import Utf16Index

CATEGORY_CHOICES = [category.value for category in DETECTABLE_CATEGORIES]


def _read_text(text: str | None) -> str:
    """Use the argument if given, otherwise read stdin."""
    if text is not None:
        return text
    data = click.get_text_stream("stdin").read()
    return data[:-1] if data.endswith("\n") else data


def _categories(types: tuple[str, ...]) -> list[EntityCategory]:
    if types:
        return [EntityCategory(value) for value in types]
    return get_settings().detector_types


def _exclusion_filter(names: tuple[str, ...]) -> FilterPredicate | None:
    """Build a case-insensitive predicate rejecting *names*."""
    if not names:
        return None
    excluded = {name.lstrip("@#").lower() for name in names}
    return lambda word: word.lower() not in excluded


def _format_entity(entity: ActiveEntity) -> str:
    return (
        f"{entity.category.value:<8} {entity.value}  "
        f"[{entity.range.location}, {entity.range.end})"
    )


@click.group()
@click.version_option(__version__, prog_name="activelabel")
@click.option("--log-level", default=None, help="Override ACTIVELABEL_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Detect mentions, hashtags and URLs in text."""
    try:
        settings = get_settings()
    except ActiveLabelError as e:
        raise click.ClickException(e.message) from e
    configure_logging(log_level or settings.log_level, json_output=settings.log_json)


@cli.command("extract")
@click.argument("text", required=False)
@click.option(
    "--type", "-t", "types",
    multiple=True,
    type=click.Choice(CATEGORY_CHOICES),
    help="Category to detect (repeatable). Defaults to ACTIVELABEL_DETECTOR_TYPES.",
)
@click.option("--exclude-mention", multiple=True, help="Mention to ignore (repeatable).")
@click.option("--exclude-hashtag", multiple=True, help="Hashtag to ignore (repeatable).")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def cli_extract(
    text: str | None,
    types: tuple[str, ...],
    exclude_mention: tuple[str, ...],
    exclude_hashtag: tuple[str, ...],
    as_json: bool,
) -> None:
    """List the entities found in TEXT (or stdin)."""
    results = extract(
        _read_text(text),
        categories=_categories(types),
        mention_filter=_exclusion_filter(exclude_mention),
        hashtag_filter=_exclusion_filter(exclude_hashtag),
    )

    if as_json:
        data = {
            category.value: [entity.model_dump(mode="json") for entity in entities]
            for category, entities in results.items()
        }
        click.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return

    found = False
    for entities in results.values():
        for entity in entities:
            click.echo(_format_entity(entity))
            found = True
    if not found:
        click.echo("No entities found.")


@cli.command("highlight")
@click.argument("text", required=False)
@click.option(
    "--type", "-t", "types",
    multiple=True,
    type=click.Choice(CATEGORY_CHOICES),
    help="Category to highlight (repeatable).",
)
def cli_highlight(text: str | None, types: tuple[str, ...]) -> None:
    """Print TEXT (or stdin) with its entities styled."""
    settings = get_settings()
    source = _read_text(text)
    results = extract(source, categories=_categories(types))
    index = Utf16Index(source)

    parts: list[str] = []
    cursor = 0
    for entity in resolve_overlaps(results):
        start, end = index.codepoint_span(entity.range.location, entity.range.length)
        parts.append(source[cursor:start])
        parts.append(
            click.style(
                source[start:end],
                fg=settings.color_for(entity.category),
                underline=True,
            )
        )
        cursor = end
    parts.append(source[cursor:])
    click.echo("".join(parts))


@cli.command("tap")
@click.argument("text")
@click.argument("offset", type=click.IntRange(min=0))
def cli_tap(text: str, offset: int) -> None:
    """Report the entity under UTF-16 OFFSET in TEXT."""
    label = ActiveText(
        text,
        detector_types=get_settings().detector_types,
        on_select=lambda value, category: click.echo(f"{category.value}: {value}"),
    )
    if label.select(offset) is None:
        raise click.ClickException(f"No entity at offset {offset}")


if __name__ == "__main__":
    cli()
