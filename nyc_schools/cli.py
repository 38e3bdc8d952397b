"""Terminal front end: renders the school list and detail rows as text."""

import logging
import queue
import sys
from collections.abc import Callable

import click

from nyc_schools.controllers import DetailController, ListController, State
from nyc_schools.rows import AddressRow, DisplayRow, EligibilityRow, OverviewRow, SatRow
from nyc_schools.service import DataService
from nyc_schools.utils import DEFAULT_TIMEOUT

NA = "N/A"


class MainLoop:
    """Runs dispatched callables on the thread that renders output."""

    def __init__(self):
        self._queue: queue.Queue[Callable[[], None]] = queue.Queue()

    def dispatch(self, fn: Callable[[], None]) -> None:
        self._queue.put(fn)

    def run_until_loaded(self, controller, poll: float = 0.1) -> None:
        while controller.is_loading:
            try:
                fn = self._queue.get(timeout=poll)
            except queue.Empty:
                continue
            fn()


def render_row(row: DisplayRow) -> list[str]:
    if isinstance(row, OverviewRow):
        lines = [row.name or NA, "=" * len(row.name or NA)]
        if row.overview:
            lines.append(row.overview)
        return lines
    if isinstance(row, SatRow):
        return [
            "SAT Scores",
            f"  Test takers: {row.test_takers or NA}",
            f"  Math:        {row.math or NA}",
            f"  Reading:     {row.reading or NA}",
            f"  Writing:     {row.writing or NA}",
        ]
    if isinstance(row, EligibilityRow):
        return ["Eligibility", f"  {row.text}"]
    if isinstance(row, AddressRow):
        return [
            f"Address: {row.address or NA}",
            f"Phone: {row.phone or NA}",
            f"Email: {row.email or NA}",
            f"Website: {row.website or NA}",
            f"Hours: {row.hours or NA}",
        ]
    raise TypeError(f"Unknown row type {type(row).__name__}")


def render_detail(detail: DetailController) -> str:
    return "\n\n".join("\n".join(render_row(row)) for row in detail.rows)


def _load_list(ctx: click.Context) -> ListController:
    loop: MainLoop = ctx.obj["loop"]
    controller = ListController(ctx.obj["service"], dispatch=loop.dispatch)
    click.echo("Loading NYC schools...", err=True)
    controller.activate()
    loop.run_until_loaded(controller)
    if controller.state is State.FAILED:
        raise click.ClickException(f"Could not load schools: {controller.error}")
    return controller


def _show_detail(ctx: click.Context, controller: ListController, index: int) -> None:
    loop: MainLoop = ctx.obj["loop"]
    detail = controller.select(index)
    detail.activate()
    loop.run_until_loaded(detail)
    if detail.state is State.FAILED:
        click.echo(f"SAT scores unavailable: {detail.error}", err=True)
    click.echo(render_detail(detail))
    detail.close()


@click.group()
@click.option("--timeout", type=float, default=DEFAULT_TIMEOUT, show_default=True,
              help="HTTP timeout in seconds.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, timeout: float, verbose: bool) -> None:
    """Browse NYC high schools and their SAT results."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    if "service" not in ctx.obj:
        ctx.obj["service"] = ctx.with_resource(DataService(timeout=timeout))
    ctx.obj.setdefault("loop", MainLoop())


@main.command("list")
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Show at most N schools.")
@click.pass_context
def list_schools(ctx: click.Context, limit: int | None) -> None:
    """Print all schools, numbered."""
    controller = _load_list(ctx)
    items = controller.items[:limit] if limit is not None else controller.items
    for i, item in enumerate(items, start=1):
        click.echo(f"{i:4d}. {item.name or NA} ({item.dbn or NA})")
    click.echo(f"\nTotal: {len(controller.items)} schools", err=True)


@main.command()
@click.argument("dbn")
@click.pass_context
def show(ctx: click.Context, dbn: str) -> None:
    """Show the detail view for the school with DBN."""
    if not dbn.strip():
        raise click.BadParameter("DBN must not be empty", param_hint="DBN")
    controller = _load_list(ctx)
    wanted = dbn.strip().upper()
    for index, school in enumerate(controller.schools):
        if (school.dbn or "").upper() == wanted:
            _show_detail(ctx, controller, index)
            return
    raise click.ClickException(f"No school with DBN {dbn}")


@main.command()
@click.pass_context
def browse(ctx: click.Context) -> None:
    """Pick a school from the list and show its detail view."""
    controller = _load_list(ctx)
    if not controller.schools:
        click.echo("No schools returned.")
        return
    for i, item in enumerate(controller.items, start=1):
        click.echo(f"{i:4d}. {item.name or NA}")
    number = click.prompt(
        "School number", type=click.IntRange(1, len(controller.schools))
    )
    click.echo()
    _show_detail(ctx, controller, number - 1)
