import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from docextract.config.settings import Settings
from docextract.export.exporters import to_csv, to_delimited_lines
from docextract.logging.logger import Log
from docextract.processor.models import LocalSourceFile
from docextract.processor.orchestrator import build_orchestrator
from docextract.records.models import DocumentKind


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="docextract",
        description="Extract structured data from invoices and business cards.",
    )
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in DocumentKind],
        default=DocumentKind.INVOICE.value,
        help="Document kind shared by every file in the batch",
    )
    parser.add_argument(
        "--format",
        choices=["csv", "lines"],
        default="csv",
        help="csv: one row per record; lines: fields joined by '; '",
    )
    parser.add_argument("files", nargs="*", type=Path, help="Images or PDFs to process")
    return parser.parse_args(argv)


SUPPORTED_MEDIA_TYPES = frozenset({"image/jpeg", "image/png", "application/pdf"})


def collect_files(paths: Sequence[Path]) -> list[LocalSourceFile]:
    """Wrap *paths* as source files, skipping types the models do not accept."""
    files: list[LocalSourceFile] = []
    for path in paths:
        source = LocalSourceFile(path)
        if source.media_type not in SUPPORTED_MEDIA_TYPES:
            Log.warning(f"Skipping {source.name}: unsupported media type {source.media_type}")
            continue
        files.append(source)
    return files


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> orchestrator -> batch -> export to stdout."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    kind = DocumentKind(args.kind)
    files = collect_files(args.files)
    if not files:
        Log.error(f"No files to process for {kind.value} batch")
        return 2

    try:
        orchestrator = build_orchestrator(settings)
    except ValueError as exc:
        Log.error(f"Invalid configuration: {exc}")
        return 2

    records = asyncio.run(orchestrator.run(files, kind))

    exported = to_csv(records, kind) if args.format == "csv" else to_delimited_lines(records, kind)
    sys.stdout.write(exported)
    if exported and not exported.endswith("\n"):
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
