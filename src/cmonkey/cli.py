import argparse
import json
import logging
import os
import sys

from cmonkey.functions import collect_hits, summarize
from cmonkey.io import create_meme_options, read_motifs, write_meme


def setup_logging(verbose: bool):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def create_arg_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        description="cmonkey-motif: inspect and convert cMonkey motif JSON files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
 Examples:
   # One summary line per motif
   cmonkey-motif show motifs.json

   # Export PSSMs to MEME format
   cmonkey-motif meme motifs.json -o motifs.meme

   # MAST hits of all motifs as a TSV table
   cmonkey-motif hits motifs.json -o hits.tsv
         """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(dest="mode", help="Operation mode", required=True)

    show_parser = subparsers.add_parser("show", help="Print a JSON summary line for every motif.")
    show_parser.add_argument("motifs", help="Path to a JSON file with a motif or an array of motifs.")

    meme_parser = subparsers.add_parser("meme", help="Write motif PSSMs in MEME format.")
    meme_parser.add_argument("motifs", help="Path to a JSON file with a motif or an array of motifs.")
    meme_parser.add_argument("-o", "--output", required=True, help="Path of the MEME file to write.")
    meme_parser.add_argument(
        "--background",
        type=float,
        nargs=4,
        metavar=("A", "C", "G", "T"),
        default=None,
        help="Background letter frequencies. (default: uniform)",
    )

    hits_parser = subparsers.add_parser("hits", help="Write MAST hits of all motifs as a TSV table.")
    hits_parser.add_argument("motifs", help="Path to a JSON file with a motif or an array of motifs.")
    hits_parser.add_argument("-o", "--output", default=None, help="Output path. (default: stdout)")

    return parser


def validate_inputs(args):
    """Validate input arguments."""
    if not os.path.exists(args.motifs):
        raise FileNotFoundError(f"Motif file not found: {args.motifs}")
    background = getattr(args, "background", None)
    if background is not None and any(freq < 0 for freq in background):
        raise ValueError("Background frequencies must be non-negative")


def main_cli():
    """Main CLI entry point."""
    parser = create_arg_parser()

    if len(sys.argv) == 1:
        parser.print_help(sys.stderr)
        sys.exit(1)

    args = parser.parse_args()

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        validate_inputs(args)
        motifs = read_motifs(args.motifs)
        logger.debug(f"Loaded {len(motifs)} motifs from {args.motifs}")

        if args.mode == "show":
            for motif in motifs:
                print(json.dumps(summarize(motif)))
        elif args.mode == "meme":
            options = create_meme_options(background=args.background)
            write_meme(motifs, args.output, options)
        else:
            table = collect_hits(motifs)
            table.to_csv(args.output or sys.stdout, sep="\t", index=False)

    except Exception as e:
        print(f"ERROR: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main_cli()
