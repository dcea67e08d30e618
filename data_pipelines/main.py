"""
Command-line entry point for VPTS daily files.

Lists the file references for a date range and, with --summarize, reads each
existing file and reports how many rows it holds and how many numeric fields
could not be parsed.
"""
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from data_pipelines.config import NUM_HEADER_LINES, NUMERIC_COLUMNS
from data_pipelines.services.date_range_expander import DateRangeExpander, InvalidRangeError
from data_pipelines.services.vpts_reader import VptsReader, to_dataframe


def summarize_files(references: List[str], reader: VptsReader) -> dict:
    """
    Read each existing file and collect row statistics.

    Returns:
        Dict with overall statistics
    """
    stats = {"files_found": 0, "files_missing": 0, "rows": 0, "invalid_fields": 0}

    for reference in tqdm(references, desc="Reading VPTS files"):
        path = Path(reference)
        if not path.exists():
            tqdm.write(f"✗ {reference} not found")
            stats["files_missing"] += 1
            continue

        df = to_dataframe(reader.read(path))
        invalid = int(df[NUMERIC_COLUMNS].isna().sum().sum())
        tqdm.write(f"✓ {reference}: {len(df):,} rows, {invalid:,} invalid numeric fields")

        stats["files_found"] += 1
        stats["rows"] += len(df)
        stats["invalid_fields"] += invalid

    return stats


def main(argv: Optional[List[str]] = None) -> int:
    """Run the VPTS file CLI."""
    import argparse

    parser = argparse.ArgumentParser(description="List and summarize daily VPTS files")
    parser.add_argument(
        "--start-date",
        type=str,
        required=True,
        help="First day (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--end-date",
        type=str,
        required=True,
        help="Last day, inclusive (YYYY-MM-DD)",
    )
    parser.add_argument(
        "--directory",
        type=str,
        default="./",
        help="Directory prepended verbatim to each file name (default: ./)",
    )
    parser.add_argument(
        "--summarize",
        action="store_true",
        help="Read each file and report row counts",
    )
    parser.add_argument(
        "--header-lines",
        type=int,
        default=NUM_HEADER_LINES,
        help=f"Non-data lines preceding the CSV header (default: {NUM_HEADER_LINES})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print each date as it is expanded",
    )

    args = parser.parse_args(argv)

    on_date = (lambda day: print(f"  {day.isoformat()}")) if args.verbose else None
    expander = DateRangeExpander(on_date=on_date)

    try:
        references = expander.expand(args.start_date, args.end_date, args.directory)
    except InvalidRangeError as e:
        print(f"Error: {e}")
        return 1
    except ValueError as e:
        print(f"Error: Invalid date. Use YYYY-MM-DD format. ({e})")
        return 1

    if not args.summarize:
        for reference in references:
            print(reference)
        return 0

    reader = VptsReader(num_header_lines=args.header_lines, expander=expander)
    stats = summarize_files(references, reader)

    print()
    print(f"Files: {stats['files_found']} found, {stats['files_missing']} missing")
    print(f"Rows: {stats['rows']:,}")
    print(f"Invalid numeric fields: {stats['invalid_fields']:,}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
