"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console backed by StringIO; the caller
extracts the text via ``get_output(console)``. Renderers are dispatched
by ``result.op`` in :func:`render_result`, and unknown ops fall through
to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from folioctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from folioctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    for key in ("items", "pages"):
        items = result.data.get(key)
        if isinstance(items, list):
            return "\n".join(i for i in (_extract_id(item) for item in items) if i)
    if "query" in result.data:
        return str(result.data["query"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    if isinstance(item, dict):
        val = item.get("id")
        return "" if val is None else str(val)
    return str(item)


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="folio.ok")
    op = Text(f"  {result.op}", style="folio.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="folio.key")
    if key == "id":
        v = Text(str(value), style="folio.id")
    elif key in ("output", "url"):
        v = Text(str(value), style="folio.path")
    elif key == "query":
        v = Text(str(value), style="folio.query")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_state(console: Console, state: dict[str, Any]) -> None:
    techs = state.get("techs") or []
    _field(console, "techs", ", ".join(techs) if techs else "(none)")
    _field(console, "sort", state.get("sort", ""))
    _field(console, "search", state.get("search") or "(none)")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="folio.error")
    op = Text(f"  {result.op}", style="folio.op")
    console.print(label, op, Text(" - "), msg, sep="")

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Query renderers ───────────────────────────────────────────────────


def _render_domain_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_domains results as a table."""
    d = result.data
    items = d.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="folio.id", no_wrap=True)
    table.add_column("Name", style="folio.title")
    table.add_column("Commits", style="folio.count", justify="right")
    table.add_column("Period")
    if verbose:
        table.add_column("Technologies", style="dim")

    for item in items:
        row = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("commit_count", "")),
            str(item.get("period", "")),
        ]
        if verbose:
            row.append(", ".join(item.get("technologies", [])))
        table.add_row(*row)

    if items:
        console.print(table)
    else:
        console.print(Text("No domains match the current filters.", style="dim"))
    console.print(f"\n{d.get('count', len(items))} domains")
    if d.get("query"):
        console.print(Text(f"?{d['query']}", style="folio.query"))


def _render_domain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render get_domain as a panel followed by commits and related domains."""
    d = result.data
    lines = [
        f"{d.get('commit_count', 0)} commits | {d.get('period', '')}",
        f"technologies: {', '.join(d.get('technologies', []))}",
        "",
        str(d.get("description", "")),
    ]
    highlights = d.get("highlights", [])
    if highlights:
        lines.append("")
        lines.extend(f"- {h}" for h in highlights)
    title = f"{d.get('id', '?')} | {d.get('name', '')}"
    console.print(Panel(Text("\n".join(lines)), title=title, border_style="dim", expand=False))

    commits = d.get("commits", [])
    if commits:
        table = Table(title="Key commits", show_header=True, pad_edge=False, expand=False)
        table.add_column("Hash", style="folio.hash", no_wrap=True)
        table.add_column("Date", no_wrap=True)
        table.add_column("Message")
        if verbose:
            table.add_column("URL", style="folio.path")
        for c in commits:
            row = [c.get("hash", ""), c.get("date", ""), c.get("message", "")]
            if verbose:
                row.append(c.get("url", ""))
            table.add_row(*row)
        console.print(table)

    related = d.get("related", [])
    if related:
        names = ", ".join(f"{r['id']} ({r['overlap']})" for r in related)
        _field(console, "related", names)
    projects = d.get("projects", [])
    if projects:
        _field(console, "projects", ", ".join(p["id"] for p in projects))


def _render_related(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render related_domains with overlap scores and shared technologies."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="folio.id", no_wrap=True)
    table.add_column("Name", style="folio.title")
    table.add_column("Overlap", style="folio.count", justify="right")
    table.add_column("Shared", style="dim")
    for item in items:
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("overlap", 0)),
            ", ".join(item.get("shared", [])),
        )
    console.print(table)


def _render_technologies(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """Render list_technologies; filter-eligible tags are marked."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="folio.id", no_wrap=True)
    table.add_column("Name", style="folio.title")
    table.add_column("Domains", style="folio.count", justify="right")
    table.add_column("Filter", justify="center")
    if verbose:
        table.add_column("Color")
    for item in items:
        row: list[Any] = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("domains", 0)),
            "yes" if item.get("filter") else "",
        ]
        if verbose:
            color = str(item.get("color", ""))
            row.append(Text(color, style=color))
        table.add_row(*row)
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} technologies")


def _render_url_state(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render encode_state / decode_state."""
    _status_line(console, result)
    d = result.data
    _field(console, "query", d.get("query") or "(empty)")
    if "url" in d:
        _field(console, "url", d["url"])
    _render_state(console, d.get("state", {}))


# ── Build renderer ────────────────────────────────────────────────────


def _render_build(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "output", d.get("output", ""))
    _field(console, "pages", d.get("count", 0))
    if d.get("listing_url"):
        _field(console, "listing", d["listing_url"])
    if result.warnings:
        console.print(Text(f"  skipped: {len(result.warnings)}", style="folio.warning"))
    if verbose:
        for page in d.get("pages", []):
            console.print(f"    {page}")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "list_domains": _render_domain_table,
    "get_domain": _render_domain,
    "related_domains": _render_related,
    "list_technologies": _render_technologies,
    "encode_state": _render_url_state,
    "decode_state": _render_url_state,
    "build_site": _render_build,
}
