"""
Command line interface for the DemoHub catalog tooling.

Usage examples:
    demohub scaffold --root ./catalog
    demohub load sales_db --url sqlite:///demohub.db
    demohub check sales_db --url sqlite:///demohub.db --persist
    demohub analyze sales_db pipeline --url sqlite:///demohub.db
"""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import pandas as pd

from .analytics import iot, medtech, sales
from .config import config
from .datasets import get_dataset, list_datasets
from .datasets.loader import DatasetLoader
from .quality import DataQualityMonitor, load_attachments, results_frame
from .quality import reports
from .scaffold import add_gitkeep, create_catalog_tree
from .utils.logger import get_logger
from .warehouse import WarehouseConnector

logger = get_logger(__name__)

# dataset -> analysis name -> (tables read, function over those frames)
ANALYSES: Dict[str, Dict[str, Tuple[List[str], Callable[..., pd.DataFrame]]]] = {
    "sales_db": {
        "customer-value": (["customer", "opportunities"], sales.customer_value_analysis),
        "high-value": (["customer", "opportunities"], sales.high_value_customers),
        "likely-to-close": (["opportunities"], sales.opportunities_likely_to_close),
        "data-quality": (["customer"], sales.data_quality_issues),
        "pipeline": (["opportunities"], sales.pipeline_analysis),
    },
    "iot_db": {
        "latest-readings": (["sensor_data"], iot.latest_readings),
        "performance": (["sensor_data"], iot.performance_metrics),
    },
    "medtech_db": {
        "complaint-rates": (["devices", "customer_complaints"], medtech.complaint_rates),
        "warranty": (["devices"], medtech.warranty_expiring),
        "compliance": (["devices"], medtech.compliance_overdue),
        "satisfaction": (["devices", "customer_complaints"], medtech.satisfaction_scores),
    },
}

REPORTS = {
    "latest": reports.latest_results,
    "summary": reports.issue_summary,
    "trends": reports.daily_trends,
}


def _connector(args) -> WarehouseConnector:
    return WarehouseConnector(connection_string=args.url)


def _print_frame(df: pd.DataFrame) -> None:
    if df.empty:
        print("(no rows)")
    else:
        print(df.to_string(index=False))


def cmd_scaffold(args) -> None:
    tree = create_catalog_tree(args.root)
    print(f"Directory structure created successfully with .gitkeep files! "
          f"({len(tree.directories)} directories, {len(tree.files)} files under {tree.root})")


def cmd_gitkeep(args) -> None:
    touched = add_gitkeep(args.root)
    for path in touched:
        print(path)
    print(f"Added .gitkeep files to {len(touched)} empty directories!")


def cmd_datasets(args) -> None:
    for name in list_datasets():
        dataset = get_dataset(name)
        print(f"{name:<12}{dataset.description}")
        print(f"{'':<12}tables: {', '.join(dataset.table_names)}")


def cmd_ddl(args) -> None:
    print(get_dataset(args.dataset).render_ddl(args.dialect))


def cmd_load(args) -> None:
    dataset = get_dataset(args.dataset)
    loader = DatasetLoader(_connector(args))
    loader.install(dataset, drop_existing=not args.keep_existing, stage_dir=args.stage_dir)
    loader.print_summary(dataset)


def cmd_reset(args) -> None:
    dataset = get_dataset(args.dataset)
    loader = DatasetLoader(_connector(args))
    if args.truncate:
        loader.truncate(dataset)
    else:
        loader.reset(dataset)


def cmd_run_script(args) -> None:
    connector = _connector(args)
    outcomes = connector.run_script(Path(args.script), stop_on_error=not args.continue_on_error)
    failed = [o for o in outcomes if o["status"] != "ok"]
    for outcome in outcomes:
        if outcome["rows"]:
            _print_frame(pd.DataFrame(outcome["rows"]))
    print(f"{len(outcomes) - len(failed)} statements succeeded, {len(failed)} failed")
    if failed:
        sys.exit(1)


def cmd_check(args) -> None:
    dataset = get_dataset(args.dataset)
    monitor = DataQualityMonitor(_connector(args), timezone=args.timezone)
    attachments = load_attachments(args.attachments) if args.attachments else None
    results = monitor.run(dataset, attachments)
    _print_frame(results_frame(results).drop(columns=["measurement_time", "table_database"]))
    if args.persist:
        monitor.persist(results, args.results_table)
    if args.fail_on_issues and any(r.passed is False for r in results):
        sys.exit(1)


def cmd_report(args) -> None:
    monitor = DataQualityMonitor(_connector(args))
    results = monitor.load_results(args.results_table)
    _print_frame(REPORTS[args.kind](results, args.database))


def cmd_analyze(args) -> None:
    dataset = get_dataset(args.dataset)
    analyses = ANALYSES.get(dataset.name, {})
    if args.analysis not in analyses:
        raise ValueError(
            f"Unknown analysis '{args.analysis}' for {dataset.name}, expected one of {sorted(analyses)}"
        )
    tables, func = analyses[args.analysis]
    connector = _connector(args)
    frames = [connector.read_table(name) for name in tables]
    _print_frame(func(*frames))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="demohub", description="DemoHub catalog tooling")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def with_url(sub: argparse.ArgumentParser) -> argparse.ArgumentParser:
        sub.add_argument("--url", help="SQLAlchemy URL of the target warehouse (default from config)")
        return sub

    sub = subparsers.add_parser("scaffold", help="Create the catalog directory tree")
    sub.add_argument("--root", default=config.catalog.root, help="Catalog root directory")
    sub.set_defaults(func=cmd_scaffold)

    sub = subparsers.add_parser("gitkeep", help="Add .gitkeep files to empty directories")
    sub.add_argument("--root", default=config.catalog.root, help="Directory to scan")
    sub.set_defaults(func=cmd_gitkeep)

    sub = subparsers.add_parser("datasets", help="List the sample datasets")
    sub.set_defaults(func=cmd_datasets)

    sub = subparsers.add_parser("ddl", help="Print CREATE TABLE statements for a dataset")
    sub.add_argument("dataset", help="Dataset name")
    sub.add_argument("--dialect", default="postgresql", help="SQL dialect (postgresql or sqlite)")
    sub.set_defaults(func=cmd_ddl)

    sub = with_url(subparsers.add_parser("load", help="Install a dataset into the warehouse"))
    sub.add_argument("dataset", help="Dataset name")
    sub.add_argument("--stage-dir", help="Local directory holding staged files")
    sub.add_argument("--keep-existing", action="store_true", help="Do not drop existing tables first")
    sub.set_defaults(func=cmd_load)

    sub = with_url(subparsers.add_parser("reset", help="Drop (or clear) a dataset's tables"))
    sub.add_argument("dataset", help="Dataset name")
    sub.add_argument("--truncate", action="store_true", help="Delete rows but keep the tables")
    sub.set_defaults(func=cmd_reset)

    sub = with_url(subparsers.add_parser("run-script", help="Execute a SQL script statement by statement"))
    sub.add_argument("script", help="Path to the SQL script")
    sub.add_argument("--continue-on-error", action="store_true", help="Keep going after a failed statement")
    sub.set_defaults(func=cmd_run_script)

    sub = with_url(subparsers.add_parser("check", help="Measure data quality metrics on a dataset"))
    sub.add_argument("dataset", help="Dataset name")
    sub.add_argument("--attachments", help="JSON file with metric attachments")
    sub.add_argument("--timezone", help="Session timezone for freshness metrics")
    sub.add_argument("--persist", action="store_true", help="Append results to the results table")
    sub.add_argument("--results-table", help="Results table name")
    sub.add_argument("--fail-on-issues", action="store_true", help="Exit 1 when a threshold is exceeded")
    sub.set_defaults(func=cmd_check)

    sub = with_url(subparsers.add_parser("report", help="Summarize persisted data quality results"))
    sub.add_argument("kind", choices=sorted(REPORTS), help="Report to print")
    sub.add_argument("--database", help="Only results for this database")
    sub.add_argument("--results-table", help="Results table name")
    sub.set_defaults(func=cmd_report)

    sub = with_url(subparsers.add_parser("analyze", help="Run an analysis query over a dataset"))
    sub.add_argument("dataset", help="Dataset name")
    sub.add_argument("analysis", help="Analysis name, e.g. pipeline or satisfaction")
    sub.set_defaults(func=cmd_analyze)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main execution function."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        args.func(args)
    except KeyboardInterrupt:
        logger.warning("\nOperation cancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"{args.command} failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
