from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import AppConfig, ConfigError, default_config, load_config
from .ingestion.reader import read_dataset
from .reconcile.diff import diff_rows, format_row
from .reconcile.engine import ReconciliationResult
from .session import ComparisonFailed, ComparisonSession
from .utils.runs import new_run_id, prepare_run_dir, utc_now_iso, write_run_meta

console = Console()

DEFAULT_CONFIG = "config.yml"
PREVIEW_ROWS = 10
PREVIEW_COLUMNS = 4


def _load_config_or_exit(config_arg: Optional[str]) -> AppConfig:
    config_path = Path(config_arg or DEFAULT_CONFIG)
    if config_arg is None and not config_path.exists():
        return default_config()
    try:
        return load_config(config_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(2)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {escape(str(e))}")
        sys.exit(2)
    except Exception as e:  # unexpected
        console.print(f"[red]Unexpected error loading config:[/red] {escape(str(e))}")
        sys.exit(1)


def _records_table(title: str, records: List[Dict[str, Any]], max_columns: Optional[int] = None) -> Table:
    table = Table(title=title, show_lines=False)
    columns = list(records[0].keys()) if records else []
    if max_columns is not None:
        columns = columns[:max_columns]
    for col in columns:
        table.add_column(escape(str(col)), overflow="fold")
    for record in records:
        table.add_row(*[escape(str(record.get(col) or "")) for col in columns])
    return table


def _print_result(result: ReconciliationResult, shown: List[Dict[str, Any]], search: Optional[str]) -> None:
    fields = result.source_fields
    ref_fields = result.reference_fields
    if fields and ref_fields:
        console.print(
            f"[bold]Source fields:[/bold] email={escape(repr(fields.email))} "
            f"phone={escape(repr(fields.phone))} name={escape(repr(fields.name))}"
        )
        console.print(
            f"[bold]Reference fields:[/bold] email={escape(repr(ref_fields.email))} "
            f"phone={escape(repr(ref_fields.phone))}"
        )

    if not result.has_unmatched:
        console.print("[bold green]All source leads are present in the reference dataset.[/bold green]")
        return

    console.print(f"[bold yellow]Missing leads:[/bold yellow] {len(result.unmatched)}")
    if search:
        console.print(f"Showing {len(shown)} of {len(result.unmatched)} leads matching {escape(repr(search))}")
    if shown:
        console.print(_records_table("Missing leads", shown))
    else:
        console.print(f"[yellow]No leads found matching {escape(repr(search))}[/yellow]")

    console.print(
        _records_table(
            f"Combined leads (first {PREVIEW_ROWS} of {len(result.combined)})",
            result.combined[:PREVIEW_ROWS],
            max_columns=PREVIEW_COLUMNS,
        )
    )


def cmd_compare(args: argparse.Namespace) -> int:
    cfg = _load_config_or_exit(args.config)

    source_path = Path(args.source)
    reference_path = Path(args.reference)
    try:
        source = read_dataset(source_path)
        reference = read_dataset(reference_path)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 2
    console.print(
        f"[bold]Source:[/bold] {escape(str(source_path))} ({len(source)} rows)  "
        f"[bold]Reference:[/bold] {escape(str(reference_path))} ({len(reference)} rows)"
    )

    with ComparisonSession(
        catalog=cfg.catalog,
        missing_filename=cfg.export.missing_filename,
        combined_filename=cfg.export.combined_filename,
    ) as session:
        try:
            result = session.compare(source, reference)
        except ComparisonFailed as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            return 1

        shown = session.search(args.search)
        _print_result(result, shown, args.search)

        if args.no_write:
            return 0

        run_id = args.run_id or new_run_id()
        out_dir = Path(args.out_dir) if args.out_dir else Path(cfg.io.out_dir)
        run_dir = prepare_run_dir(out_dir, run_id)

        output_files: Dict[str, str] = {}
        for key, handle in (("missing", session.missing_export), ("combined", session.combined_export)):
            if handle is not None:
                output_files[key] = str(handle.save_to(run_dir))

    run_meta = {
        "run_id": run_id,
        "created_at": utc_now_iso(),
        "source_path": str(source_path),
        "reference_path": str(reference_path),
        "output_files": output_files,
        "counts": {"source": len(source), **result.counts()},
    }
    try:
        meta_path = write_run_meta(run_dir, run_meta)
    except Exception as e:
        console.print(f"[red]Failed to write run_meta.json:[/red] {escape(str(e))}")
        return 1

    console.print(f"[bold green]Run ID:[/bold green] {escape(run_id)}")
    console.print(f"[bold]Run directory:[/bold] {escape(str(run_dir))}")
    for key, path in output_files.items():
        console.print(f"[bold]{key.capitalize()} CSV:[/bold] {escape(path)}")
    console.print(f"[bold]Meta file:[/bold] {escape(str(meta_path))}")
    return 0


def cmd_diff(args: argparse.Namespace) -> int:
    try:
        first = read_dataset(Path(args.first))
        second = read_dataset(Path(args.second))
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 2

    diffs = diff_rows(first, second)
    console.print(f"[bold]Total rows:[/bold] {max(len(first), len(second))}")
    if not diffs:
        console.print("[bold green]Files are identical![/bold green] No differences were found.")
        return 0

    plural = "s" if len(diffs) != 1 else ""
    console.print(f"[yellow]Found {len(diffs)} mismatched row{plural}.[/yellow]")
    for n, idx in enumerate(diffs, 1):
        console.print(f"[bold red]Row {idx + 1} Mismatch[/bold red] (difference #{n})")
        console.print(f"  First CSV:  {escape(format_row(first[idx] if idx < len(first) else None))}")
        console.print(f"  Second CSV: {escape(format_row(second[idx] if idx < len(second) else None))}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="leadrecon",
        description="Find ad-platform leads missing from a CRM export and build a combined CSV.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # compare
    p_cmp = sub.add_parser("compare", help="Compare source leads against reference leads")
    p_cmp.add_argument("source", type=str, help="Source CSV (e.g. Facebook leads export)")
    p_cmp.add_argument("reference", type=str, help="Reference CSV (e.g. CRM leads export)")
    p_cmp.add_argument("--config", type=str, help=f"Path to config file (default: {DEFAULT_CONFIG} if present)")
    p_cmp.add_argument("--out-dir", type=str, help="Override io.out_dir")
    p_cmp.add_argument("--run-id", type=str, help="Provide a specific run id")
    p_cmp.add_argument("--search", type=str, help="Only show missing leads containing this text")
    p_cmp.add_argument("--no-write", action="store_true", help="Print results without writing files")
    p_cmp.set_defaults(func=cmd_compare)

    # diff
    p_diff = sub.add_parser("diff", help="Row-by-row comparison of two CSV files")
    p_diff.add_argument("first", type=str, help="First CSV")
    p_diff.add_argument("second", type=str, help="Second CSV")
    p_diff.set_defaults(func=cmd_diff)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except SystemExit:
        raise
    except Exception as e:
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
