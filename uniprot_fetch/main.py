# uniprot_fetch/main.py
# Command line entry point: search UniProt and write the matching entries.

import argparse
import logging
import os
import sys
from contextlib import closing
from itertools import islice
from typing import List, Optional, TextIO

import jsonlines

from .accessors import accession, to_fasta, to_record
from .errors import UniprotError
from .retrieval import fetch_entries
from .search_client import search

DEFAULT_FORMAT = "fasta"


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search UniProt and download the matching entries",
    )
    parser.add_argument(
        "query",
        nargs="?",
        help="UniProt query, e.g. 'reviewed:yes AND organism:9606'",
    )
    parser.add_argument(
        "--accessions",
        metavar="FILE",
        help="Read accessions from FILE (one per line) instead of searching",
    )
    parser.add_argument(
        "--email",
        default=os.environ.get("UNIPROT_EMAIL"),
        help="Contact address sent to UniProt (default: $UNIPROT_EMAIL)",
    )
    parser.add_argument(
        "--format",
        choices=["fasta", "jsonl"],
        default=DEFAULT_FORMAT,
        help="Output format",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Output file (default: standard output)",
    )
    parser.add_argument(
        "--max-records",
        type=positive_int,
        default=None,
        help="Maximum number of entries to write",
    )
    parser.add_argument(
        "--ids-only",
        action="store_true",
        help="Only print the matching accessions",
    )
    args = parser.parse_args(argv)

    if not args.email:
        parser.error("a contact address is required: pass --email or set UNIPROT_EMAIL")
    if bool(args.query) == bool(args.accessions):
        parser.error("give either a query or --accessions FILE")
    return args


def read_accessions(path: str) -> List[str]:
    with open(path, "r") as f:
        return [line.strip() for line in f if line.strip()]


def open_output(path: Optional[str]) -> TextIO:
    return open(path, "w") if path else sys.stdout


def run(args: argparse.Namespace) -> int:
    """Runs the search and retrieval; returns the number of entries written.

    The output file is only created once there is something to write, and it
    is removed again if retrieval fails part way through.
    """
    if args.accessions:
        ids = read_accessions(args.accessions)
    else:
        ids = search(args.query, args.email)
    print(f"Found {len(ids)} accessions.", file=sys.stderr)

    out = None
    writer = None
    processed_count = 0
    try:
        if args.ids_only:
            for accession_id in islice(ids, args.max_records):
                out = out or open_output(args.output)
                out.write(accession_id + "\n")
                processed_count += 1
            return processed_count

        with closing(fetch_entries(ids, args.email)) as entries:
            for entry in islice(entries, args.max_records):
                if out is None:
                    out = open_output(args.output)
                    if args.format == "jsonl":
                        writer = jsonlines.Writer(out)
                if writer is not None:
                    writer.write(to_record(entry))
                else:
                    out.write(to_fasta(entry) + "\n")
                processed_count += 1
                print(f"Saved record {processed_count}: {accession(entry)}", file=sys.stderr)
        if writer is not None:
            writer.close()
    except UniprotError:
        if out is not None and out is not sys.stdout:
            out.close()
            os.unlink(args.output)
        raise
    finally:
        if out is not None and out is not sys.stdout:
            out.close()

    return processed_count


def main(argv: Optional[List[str]] = None) -> int:
    """Main function to run the downloader."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        processed_count = run(args)
    except UniprotError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Processed {processed_count} records.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
