# src/main.py (v1)
"""CLI entry point: analyze an edge list.

Usage:
    castnet [-v] analyze <edges.csv|edges.json> [-v] [options]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from castnet.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="castnet",
        description=f"castnet v{__version__}: community analysis of character networks",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- analyze ---
    p_analyze = subparsers.add_parser(
        "analyze", help="Detect and summarize communities in an edge list",
    )
    p_analyze.add_argument("edges", type=Path, help="CSV or JSON edge list")
    # same flag after the subcommand; SUPPRESS leaves a top-level -v in place
    p_analyze.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS,
        help="Enable debug logging",
    )
    p_analyze.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Directory for tables, layouts and graph exports",
    )
    p_analyze.add_argument(
        "--core", default=None,
        help="Comma-separated core nodes; edges between two of them are dropped",
    )
    p_analyze.add_argument(
        "--size-threshold", type=int, default=None,
        help="Communities larger than this report only their top-K nodes (default: 20)",
    )
    p_analyze.add_argument(
        "--top-k", type=int, default=None,
        help="Nodes reported per large community (default: 5)",
    )
    p_analyze.add_argument(
        "--resolution", type=float, default=None,
        help="Louvain resolution (default: 1.0)",
    )
    p_analyze.add_argument(
        "--seed", type=int, default=None,
        help="Random seed for Louvain and the force-directed layout",
    )
    p_analyze.add_argument(
        "--format", dest="report_format", choices=["text", "html"], default=None,
        help="Table format for printed and written reports (default: text)",
    )
    p_analyze.set_defaults(func=_cmd_analyze)

    return parser


def _cmd_analyze(args: argparse.Namespace) -> int:
    """Execute the analysis and print the three report tables."""
    from castnet.config.settings import load_settings
    from castnet.logging.logger import configure_from_settings
    from castnet.pipeline.runner import run_analysis
    from castnet.report.tables import render_table, report_tables

    settings = load_settings(**_overrides(args))
    configure_from_settings(settings, verbose=args.verbose)

    edges_path: Path = args.edges
    if not edges_path.exists():
        logger.error("File not found: %s", edges_path)
        return 1

    logger.info("Analyzing %s", edges_path.name)
    result = run_analysis(edges_path, settings=settings, output_dir=args.output)

    titles = {
        "summary": "Communities",
        "top_ranked": f"Top {settings.community_top_k} nodes of large communities",
        "small_communities": "Small communities, all nodes",
        "sizes": "Community sizes",
    }
    print(f"\nAnalysis complete:")
    print(f"  Run ID:       {result.run_id}")
    print(f"  Nodes:        {result.node_count}")
    print(f"  Edges:        {result.edge_count} ({result.edge_count_excluded} excluded)")
    print(f"  Communities:  {result.detection.community_count}")
    print(f"  Modularity:   {result.detection.modularity:.4f}")
    for stem, df in report_tables(result.report).items():
        print(f"\n{titles[stem]}:")
        print(render_table(df, settings.report_format))
    if result.output_files:
        print(f"\nWrote {len(result.output_files)} files to {args.output}")
    return 0


def _overrides(args: argparse.Namespace) -> dict[str, object]:
    """Map CLI flags onto Settings fields, skipping flags left unset."""
    mapping = {
        "core_nodes": args.core,
        "community_size_threshold": args.size_threshold,
        "community_top_k": args.top_k,
        "louvain_resolution": args.resolution,
        "louvain_seed": args.seed,
        "report_format": args.report_format,
    }
    return {k: v for k, v in mapping.items() if v is not None}


if __name__ == "__main__":
    sys.exit(main())
