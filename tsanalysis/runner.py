"""Command-line analysis runner.

Reads samples from the command line or a CSV column, runs the moving average,
exponential smoothing and anomaly detection, and prints the per-sample table
or a JSON summary.
"""
import argparse
import json
from pathlib import Path
from typing import List, Optional

import pandas as pd
from pydantic import ValidationError

from config.anomaly import ANOMALY_METHODS
from tsanalysis.core.config import Settings
from tsanalysis.core.errors import InvalidArgument
from tsanalysis.core.logging import setup_logging
from tsanalysis.features.series_analyzer import SeriesAnalyzer
from tsanalysis.features.series_report import analyzer_from_series, build_report, summarize

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_ARGUMENT = 2


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    defaults = settings.analysis
    parser = argparse.ArgumentParser(description="Univariate time series analysis")
    parser.add_argument("values", nargs="*", type=float, help="Samples, in time order")
    parser.add_argument("--csv", default=None, help="Read samples from this CSV file")
    parser.add_argument("--column", default=None, help="CSV column holding the samples")
    parser.add_argument("--window", type=int, default=defaults.window, help="Moving average window")
    parser.add_argument("--alpha", type=float, default=defaults.alpha, help="Smoothing factor (0..1)")
    parser.add_argument("--method", choices=ANOMALY_METHODS, default=defaults.method, help="Anomaly method")
    parser.add_argument("--threshold", type=float, default=defaults.threshold, help="Anomaly threshold")
    parser.add_argument("--json", action="store_true", help="Print a JSON summary instead of the table")
    return parser


def _load_analyzer(args: argparse.Namespace, parser: argparse.ArgumentParser) -> SeriesAnalyzer:
    if args.csv:
        if args.values:
            parser.error("pass samples either positionally or with --csv, not both")
        frame = pd.read_csv(Path(args.csv))
        column = args.column or frame.columns[0]
        if column not in frame.columns:
            parser.error(f"column '{column}' not found in {args.csv}")
        return analyzer_from_series(frame[column])
    return SeriesAnalyzer(args.values)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the analysis and return the process exit code."""
    try:
        settings = Settings.load()
    except ValidationError as e:
        setup_logging().error(f"Invalid settings: {e}")
        return EXIT_INVALID_ARGUMENT
    logger = setup_logging(settings.logging.level)
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    try:
        analyzer = _load_analyzer(args, parser)
        report = build_report(analyzer, args.window, args.alpha, args.method, args.threshold)
    except InvalidArgument as e:
        logger.error(f"Invalid argument: {e}")
        return EXIT_INVALID_ARGUMENT
    except (OSError, pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.error(f"Could not read samples: {e}")
        return EXIT_IO_ERROR

    summary = summarize(report)
    logger.info(
        f"Analyzed {summary['count']} samples (window={args.window}, alpha={args.alpha}, "
        f"method={args.method}, threshold={args.threshold}): {summary['anomaly_count']} anomalies"
    )

    if args.json:
        print(json.dumps(summary, indent=2))
    else:
        print(report.to_string())
    return EXIT_OK
