"""post CLI — a stack of short notes kept in one flat file.

Commands:
    post init                     write a default post.toml
    post add TEXT [-c COMMENT]    push a note
    post view [--top|--tail|--index|--all] [--plain]
    post clear (--all|--top N|--tail N)
    post delete [INDEX]           delete a note (default: latest)
    post yank [INDEX]             copy a note to the clipboard
    post pop [INDEX]              yank, then delete
    post backup PATH              copy the note file into PATH
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

import click

from post.config import PostConfig, init_config, load_config, resolve_home
from post.errors import PostError
from post.models import has_line_break
from post.selector import All, Index, Tail, Top
from post.sinks import SystemClipboard
from post.store import NoteStore

if TYPE_CHECKING:
    from collections.abc import Iterator

    from post.models import Record
    from post.selector import RangeSpec

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_cfg(ctx: click.Context) -> PostConfig:
    try:
        return load_config(ctx.obj.get("home"))
    except Exception as exc:
        raise click.ClickException(f"bad config: {exc}") from exc


def _store(ctx: click.Context) -> NoteStore:
    return NoteStore(_load_cfg(ctx).notes_path)


def _clipboard(cfg: PostConfig) -> SystemClipboard:
    commands = [cfg.clipboard.command] if cfg.clipboard.command else None
    return SystemClipboard(commands, timeout=cfg.clipboard.timeout)


@contextlib.contextmanager
def _reported() -> Iterator[None]:
    """Turn store failures into click errors (exit code 1)."""
    try:
        yield
    except PostError as exc:
        raise click.ClickException(str(exc)) from exc


def _pick_range(command: str, **flags: int | bool | None) -> str | None:
    given = [name for name, value in flags.items() if value is not None and value is not False]
    if len(given) > 1:
        opts = ", ".join(f"--{name}" for name in given)
        raise click.UsageError(f"{command}: {opts} are mutually exclusive")
    return given[0] if given else None


def _check_text(value: str | None, what: str) -> None:
    if value is not None and has_line_break(value):
        raise click.BadParameter(f"{what} must be a single line")


def _render(records: list[Record], *, plain: bool, title: str) -> None:
    if plain:
        for r in records:
            click.echo(str(r))
        return

    from rich.console import Console
    from rich.markup import escape as _markup_escape
    from rich.table import Table

    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("Note")
    table.add_column("Comment", style="italic")
    for r in records:
        table.add_row(str(r.index), _markup_escape(r.content), _markup_escape(r.comment or ""))
    Console().print(table)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="post")
@click.option(
    "--home",
    envvar="POST_HOME",
    default=None,
    help="Directory holding the note file and post.toml  [default: ~/.config/post]",
)
@click.option("-v", "--verbose", count=True, help="Log to stderr (-vv for debug)")
@click.pass_context
def cli(ctx: click.Context, home: str | None, verbose: int) -> None:
    """post — a simple note stack that moves text in and out of the clipboard."""
    ctx.ensure_object(dict)
    ctx.obj["home"] = home
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


# ---------------------------------------------------------------------------
# post init
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_context
def init(ctx: click.Context) -> None:
    """Write a default post.toml into the storage directory."""
    home = resolve_home(ctx.obj.get("home"))
    try:
        config_path = init_config(home)
        click.echo(f"Created {config_path}")
    except FileExistsError:
        click.echo(f"{home / 'post.toml'} already exists — skipping init")
    cfg = _load_cfg(ctx)
    click.echo(f"Notes file : {cfg.notes_path}")


# ---------------------------------------------------------------------------
# post add / view
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("text")
@click.option("--comment", "-c", default=None, help="Optional comment stored with the note")
@click.pass_context
def add(ctx: click.Context, text: str, comment: str | None) -> None:
    """Push a note onto the stack."""
    _check_text(text, "TEXT")
    _check_text(comment, "--comment")
    with _reported():
        index = _store(ctx).append(text, comment)
    click.echo(f"Added note {index}")


@cli.command()
@click.option("--top", type=click.IntRange(min=0), default=None, help="Latest N notes")
@click.option("--tail", type=click.IntRange(min=0), default=None, help="Oldest N notes")
@click.option("--index", type=click.IntRange(min=0), default=None, help="A single note")
@click.option("--all", "show_all", is_flag=True, help="Every note")
@click.option("--plain", is_flag=True, help="One '<index> | <note>' line per note, no table")
@click.pass_context
def view(
    ctx: click.Context,
    top: int | None,
    tail: int | None,
    index: int | None,
    show_all: bool,
    plain: bool,
) -> None:
    """Show notes (default: the latest 10).

    \b
    post view                 # latest notes
    post view --tail 3        # 3 oldest
    post view --index 4       # note 4 only
    """
    picked = _pick_range("view", top=top, tail=tail, index=index, all=show_all)
    cfg = _load_cfg(ctx)
    spec: RangeSpec
    if picked == "top":
        spec = Top(top)  # type: ignore[arg-type]
    elif picked == "tail":
        spec = Tail(tail)  # type: ignore[arg-type]
    elif picked == "index":
        spec = Index(index)  # type: ignore[arg-type]
    elif picked == "all":
        spec = All()
    else:
        spec = Top(cfg.view.default_top)

    with _reported():
        records = NoteStore(cfg.notes_path).view(spec)
    if not records:
        if not plain:
            click.echo("No notes", err=True)
        return
    _render(records, plain=plain, title=f"post — {len(records)} note(s)")


# ---------------------------------------------------------------------------
# post clear / delete
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--all", "clear_all", is_flag=True, help="Remove every note (repairs a corrupt file)")
@click.option("--top", type=click.IntRange(min=0), default=None, help="Remove the latest N notes")
@click.option("--tail", type=click.IntRange(min=0), default=None, help="Remove the oldest N notes")
@click.pass_context
def clear(ctx: click.Context, clear_all: bool, top: int | None, tail: int | None) -> None:
    """Delete many notes at once."""
    picked = _pick_range("clear", all=clear_all, top=top, tail=tail)
    if picked is None:
        raise click.UsageError("clear: give one of --all, --top N, --tail N")
    store = _store(ctx)
    with _reported():
        if picked == "all":
            n = store.clear_all()
        elif picked == "top":
            n = store.clear_range(Top(top))  # type: ignore[arg-type]
        else:
            n = store.clear_range(Tail(tail))  # type: ignore[arg-type]
    if n == 0:
        click.echo("Nothing to clear")
    else:
        click.echo(f"Cleared {n} note(s)")


@cli.command()
@click.argument("index", type=click.IntRange(min=0), required=False)
@click.pass_context
def delete(ctx: click.Context, index: int | None) -> None:
    """Delete a note (default: the latest)."""
    with _reported():
        record = _store(ctx).delete_at(index)
    click.echo(f"Deleted note {record.index}: {record.content}")


# ---------------------------------------------------------------------------
# post yank / pop
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("index", type=click.IntRange(min=0), required=False)
@click.pass_context
def yank(ctx: click.Context, index: int | None) -> None:
    """Copy a note onto the clipboard (default: the latest)."""
    cfg = _load_cfg(ctx)
    with _reported():
        record = NoteStore(cfg.notes_path).yank(index, _clipboard(cfg))
    click.echo(f"Yanked note {record.index}")


@cli.command()
@click.argument("index", type=click.IntRange(min=0), required=False)
@click.pass_context
def pop(ctx: click.Context, index: int | None) -> None:
    """Yank a note and then delete it (default: the latest)."""
    cfg = _load_cfg(ctx)
    with _reported():
        record = NoteStore(cfg.notes_path).pop(index, _clipboard(cfg))
    click.echo(f"Popped note {record.index}")


# ---------------------------------------------------------------------------
# post backup
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("path")
@click.pass_context
def backup(ctx: click.Context, path: str) -> None:
    """Copy the note file into an existing directory."""
    with _reported():
        target = _store(ctx).backup(path)
    if target is None:
        click.echo("Nothing to back up")
    else:
        click.echo(f"Backed up to {target}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli(standalone_mode=True)


if __name__ == "__main__":
    main()
