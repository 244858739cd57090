"""Command line interface for AUTOEYE region reports."""
from __future__ import annotations

import argparse
import logging
from typing import Optional

from .analysis.filtering import RegionFilter, SortKey
from .analysis.statistics import RegionStatistics
from .batch import run_batch
from .config import BatchConfig, SourceConfig, SourceLayout
from .engine import ReportEngine
from .io import load_participant_sources, write_tsv


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--accepted-only", action="store_true", help="Keep accepted regions only")
    parser.add_argument("--dwell-positive", action="store_true", help="Keep regions with dwell time > 0")
    parser.add_argument("--min-duration", type=float, default=None, help="Minimum region duration (ms)")
    parser.add_argument("--min-dwell", type=float, default=None, help="Minimum dwell time (ms)")
    parser.add_argument(
        "--encoding",
        choices=["utf-8", "utf-16-le", "auto"],
        default="utf-8",
        help="Encoding of the IA report (default: utf-8)",
    )
    parser.add_argument("--output", help="Optional TSV output path")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Reconstruct and summarise participant interaction regions")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    regions = sub.add_parser("regions", help="List the regions of one participant")
    regions.add_argument("root", help="Data root containing one folder per participant")
    regions.add_argument("participant", help="Participant id")
    regions.add_argument(
        "--sort",
        choices=[k.value for k in SortKey],
        default=SortKey.TIME.value,
        help="Sort key (default: time)",
    )
    _add_filter_arguments(regions)

    summary = sub.add_parser("summary", help="Statistics for several participants")
    summary.add_argument("root", help="Data root containing one folder per participant")
    summary.add_argument("participants", nargs="+", help="Participant ids")
    summary.add_argument("--jobs", type=int, default=4, help="Participants processed in parallel")
    _add_filter_arguments(summary)

    return parser


def _region_filter(args: argparse.Namespace) -> RegionFilter:
    return RegionFilter(
        accepted_only=args.accepted_only,
        dwell_positive=args.dwell_positive,
        min_duration=args.min_duration,
        min_dwell_time=args.min_dwell,
    )


def _print_statistics(title: str, stats: RegionStatistics) -> None:
    print(f"=== {title} ===")
    print(f"Regions: {stats.count}")
    print(f"  Accepted:     {stats.accepted_count} ({stats.accepted_pct:.1f}%)")
    print(f"  Not accepted: {stats.not_accepted_count} ({stats.not_accepted_pct:.1f}%)")
    print(
        f"Duration [ms]: avg {stats.avg_duration:.1f}, "
        f"min {stats.min_duration:.1f}, max {stats.max_duration:.1f}"
    )
    print(
        f"Dwell time [ms]: avg {stats.avg_dwell_time:.1f}, "
        f"min {stats.min_dwell_time:.1f}, max {stats.max_dwell_time:.1f}"
    )
    print(
        f"Accepted: avg duration {stats.avg_duration_accepted:.1f}, "
        f"avg dwell {stats.avg_dwell_accepted:.1f}"
    )
    print(
        f"Not accepted: avg duration {stats.avg_duration_not_accepted:.1f}, "
        f"avg dwell {stats.avg_dwell_not_accepted:.1f}"
    )


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    region_filter = _region_filter(args)
    source_config = SourceConfig(fixation_report_encoding=args.encoding)

    if args.command == "regions":
        sources = load_participant_sources(args.root, args.participant, SourceLayout(), source_config)
        report = ReportEngine().build(sources)
        frame = report.to_frame(region_filter, args.sort)
        if args.output:
            write_tsv(frame, args.output)
        else:
            print(frame.drop(columns=["markup"]).to_string(index=False))
        _print_statistics(f"Participant {args.participant}", report.statistics(region_filter))
        return 0

    if args.command == "summary":
        config = BatchConfig(n_jobs=args.jobs, source=source_config)
        result = run_batch(args.root, args.participants, config)
        table = result.summary(region_filter)
        if args.output:
            write_tsv(table.reset_index(), args.output)
        else:
            print(table.to_string())
        _print_statistics("All participants", result.overall_statistics(region_filter))
        for participant_id, error in result.errors.items():
            print(f"ERROR {participant_id}: {error}")
        return 1 if result.errors and not result.reports else 0

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
