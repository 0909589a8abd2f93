"""Search CLI command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from ..config import SUPPORTED_LOCALES, Config
from ..grouping import SearchView, group_results
from ..models import FILTERS
from ..search import search as run_search
from ..session import result_link
from .display import format_view
from .utils import load_data


@click.command("search")
@click.argument("query")
@click.option("--data", "data_path", type=click.Path(dir_okay=False, path_type=Path), help="JSON or YAML data export")
@click.option("--type", "filter", type=click.Choice(FILTERS), default="all", help="Restrict to one entity type")
@click.option("--limit", "-n", type=click.IntRange(min=1), help="Max results per type (or in total with --type)")
@click.option("--locale", type=click.Choice(SUPPORTED_LOCALES), help="Locale for labels and links")
@click.option("--all", "show_all", is_flag=True, help="Show every match, uncapped")
@click.option("--verbose", "-v", is_flag=True, help="Show ids and links")
@click.option("--json", "json_output", is_flag=True, help="Machine-readable JSON output")
@click.pass_obj
def search(
    config: Config,
    query: str,
    data_path: Optional[Path],
    filter: str,
    limit: Optional[int],
    locale: Optional[str],
    show_all: bool,
    verbose: bool,
    json_output: bool,
):
    """Search events, artists, venues and cities.

    With no --type, results are grouped per type and each group is capped.
    With --type, results are a single ranked list.

    Examples:
      jazz-search search "blue note" --data site.json
      jazz-search search sax --type artist --limit 5
    """
    data = load_data(data_path, config)
    locale = locale or config.locale

    results = run_search(query, data, filter, config=config)
    if show_all:
        limit = max(len(results), 1)
    view = SearchView(
        query=query,
        filter=filter,
        results=group_results(results, filter, group_limit=limit, flat_limit=limit, config=config),
    )

    if json_output:
        output = {
            "query": query,
            "filter": filter,
            "state": view.state,
            "total": view.results.total,
            "results": [
                {
                    "type": r.type,
                    "id": r.id,
                    "score": r.score,
                    "link": result_link(r, locale),
                }
                for r in view.flat
            ],
        }
        click.echo(json.dumps(output, indent=2, ensure_ascii=False))
        return

    click.echo(format_view(view, locale, verbose))
