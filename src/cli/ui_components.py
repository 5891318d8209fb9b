"""Rich UI components for the CLI.

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels can be reused across commands.
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("storefront-cms", style="bold cyan")
    subtitle = Text("Strapi content • cache tags • empty fallbacks", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _category_labels(post: dict[str, Any]) -> str:
    categories = post.get("Categories")
    if not isinstance(categories, list):
        return ""
    labels: list[str] = []
    for c in categories:
        if not isinstance(c, dict):
            continue
        label = c.get("Name") or c.get("Title") or c.get("Slug")
        if isinstance(label, str) and label:
            labels.append(label)
    return ", ".join(labels)


def build_blog_table(posts: Iterable[Any], *, title: str = "Blog posts") -> Table:
    """Table of blog posts (title, slug, categories, creation date)."""

    table = Table(title=title)
    table.add_column("Title", style="white")
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Categories", style="magenta")
    table.add_column("Created", style="dim", no_wrap=True)
    for post in posts:
        if not isinstance(post, dict):
            continue
        table.add_row(
            str(post.get("Title") or ""),
            str(post.get("Slug") or ""),
            _category_labels(post),
            str(post.get("createdAt") or ""),
        )
    return table
