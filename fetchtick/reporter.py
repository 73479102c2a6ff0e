from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from rich import box
from rich.console import Console
from rich.table import Table

from fetchtick.domain.models import Todo


def _as_mapping(item: Union[Todo, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(item, Todo):
        return item.model_dump(by_alias=True)
    return item


def print_todo(
    item: Union[Todo, Mapping[str, Any]],
    console: Optional[Console] = None,
    validated: bool = True,
) -> None:
    """
    Render a fetched todo as a rich table.

    Accepts either a validated ``Todo`` or the raw JSON mapping returned by
    ``fetch_json``. Raw mappings are shown as-is, including unexpected keys,
    since nothing checked them.
    """
    console = console or Console()
    if not isinstance(item, (Todo, Mapping)):
        # Unvalidated bodies can be any JSON value.
        console.print_json(data=item)
        return
    fields = _as_mapping(item)

    if not fields:
        console.print("[yellow]Empty response body.[/yellow]")
        return

    caption = "Validated" if validated else "Unvalidated (trusted server response)"
    table = Table(title="Fetched Todo", box=box.ROUNDED, caption=caption)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    for key, value in fields.items():
        if isinstance(value, bool):
            value_str = "[green]yes[/green]" if value else "[red]no[/red]"
        else:
            value_str = str(value)
        table.add_row(str(key), value_str)

    console.print(table)
