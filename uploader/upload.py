"""Convert a CSV training plan and push its workouts to Garmin Connect.

Usage:
    python -m uploader.upload plan.csv                       # upload
    python -m uploader.upload plan.csv --dialect semicolon   # ';'-separated plan
    python -m uploader.upload plan.csv --dry-run -o out/     # write JSON only

Exit status: 0 ok, 1 nothing to process / no credentials, 2 some uploads failed.
"""

from __future__ import annotations

import argparse
import logging
import re
from pathlib import Path

from garmin_client import GarminAuthError, GarminClient
from workout_converter import ConversionResult, convert_csv_text, get_dialect
from workout_converter.dialects import available_dialects
from workout_converter.serialization import to_garmin_json, to_garmin_json_string

from uploader.config import (
    CSV_DIALECT,
    GARMIN_EMAIL,
    GARMIN_PASSWORD,
    LOG_LEVEL,
    TOKEN_DIR,
    UPLOAD_DELAY_S,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NOTHING_TO_DO = 1
EXIT_UPLOAD_FAILED = 2


def _safe_filename(name: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]+", "_", name).strip("_") or "workout"


def _report_diagnostics(result: ConversionResult) -> None:
    for diag in result.diagnostics:
        logger.warning("%s", diag.message)


def write_documents(result: ConversionResult, output_dir: Path) -> list[Path]:
    """Write one ``<nn>_<name>.json`` per document. Returns the paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    paths: list[Path] = []
    for i, document in enumerate(result.documents, start=1):
        path = output_dir / f"{i:02d}_{_safe_filename(document.name)}.json"
        path.write_text(to_garmin_json_string(document), encoding="utf-8")
        paths.append(path)
    logger.info("Wrote %d workouts to %s", len(paths), output_dir)
    return paths


def upload_documents(result: ConversionResult, client: GarminClient) -> int:
    """Upload every document sequentially. Returns an exit status."""
    uploads = client.upload_workouts(to_garmin_json(d) for d in result.documents)
    failed = [u for u in uploads if not u.ok]
    logger.info("Uploaded %d of %d workouts", len(uploads) - len(failed), len(uploads))
    return EXIT_UPLOAD_FAILED if failed else EXIT_OK


def run(args: argparse.Namespace) -> int:
    dialect = get_dialect(args.dialect)
    try:
        text = Path(args.csv_path).read_text(encoding=args.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        logger.error("Cannot read %s: %s", args.csv_path, exc)
        return EXIT_NOTHING_TO_DO

    result = convert_csv_text(text, dialect)
    _report_diagnostics(result)
    if result.is_empty:
        logger.error("No workouts to process in %s", args.csv_path)
        return EXIT_NOTHING_TO_DO
    logger.info(
        "Converted %d workouts (%s)", len(result.documents), result.sport_mode.name.lower()
    )

    if args.dry_run:
        if args.output_dir:
            write_documents(result, Path(args.output_dir))
        else:
            for document in result.documents:
                print(to_garmin_json_string(document))
        return EXIT_OK

    # No session → no submission attempt at all.
    try:
        client = GarminClient(
            email=args.email,
            password=args.password,
            token_dir=args.token_dir,
            min_interval_s=args.delay,
        )
    except GarminAuthError as exc:
        logger.error("Cannot connect to Garmin: %s", exc)
        return EXIT_NOTHING_TO_DO

    return upload_documents(result, client)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a CSV training plan into Garmin Connect workouts"
    )
    parser.add_argument("csv_path", help="CSV plan file")
    parser.add_argument(
        "--dialect", choices=available_dialects(), default=CSV_DIALECT,
        help="CSV delimiter preset (default: %(default)s)",
    )
    parser.add_argument("--encoding", default="utf-8", help="File encoding")
    parser.add_argument(
        "--dry-run", action="store_true", help="Convert only, do not upload"
    )
    parser.add_argument(
        "-o", "--output-dir", help="With --dry-run: write one JSON file per workout here"
    )
    parser.add_argument(
        "--delay", type=float, default=UPLOAD_DELAY_S,
        help="Minimum seconds between uploads (default: %(default)s)",
    )
    parser.add_argument("--email", default=GARMIN_EMAIL)
    parser.add_argument("--password", default=GARMIN_PASSWORD)
    parser.add_argument("--token-dir", type=Path, default=TOKEN_DIR)
    parser.add_argument("--log-level", default=LOG_LEVEL)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
