"""Command-line interface for the SEC dashboard backend."""

import argparse
import json
import sys
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import BaseModel

from sec_dashboard.app import App, build_app
from sec_dashboard.client import ApiError
from sec_dashboard.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, DashboardSettings
from sec_dashboard.logging_config import setup_logging
from sec_dashboard.lookups import item_range
from sec_dashboard.models import CompanySearchRequest, DownloadType, FilingSearchRequest
from sec_dashboard.resources.companies import CompanyBrowser
from sec_dashboard.resources.downloads import DownloadActions, DownloadJobWatcher, DownloadJobs
from sec_dashboard.resources.export import ExportActions
from sec_dashboard.resources.filings import recent_filings
from sec_dashboard.resources.settings import SettingsResource

Column = tuple[str, int, Callable[[Any], Any]]

COMPANY_COLUMNS: list[Column] = [
    ("CIK", 12, lambda c: c.cik),
    ("Ticker", 8, lambda c: c.ticker or ""),
    ("Name", 45, lambda c: c.name),
    ("Filings", 8, lambda c: c.filing_count),
]

FILING_COLUMNS: list[Column] = [
    ("Form Type", 12, lambda f: f.form_type),
    ("Filing Date", 15, lambda f: f.filing_date or ""),
    ("Company", 40, lambda f: f.company_name),
    ("Accession #", 25, lambda f: f.accession_number),
]

JOB_COLUMNS: list[Column] = [
    ("Job", 38, lambda j: j.id),
    ("Type", 18, lambda j: j.type),
    ("Status", 12, lambda j: j.status.value),
    ("Progress", 9, lambda j: f"{j.progress:.0f}%"),
    ("Started", 25, lambda j: j.started_at or ""),
]

HISTORY_COLUMNS: list[Column] = [
    ("When", 26, lambda h: h.timestamp),
    ("Type", 10, lambda h: h.type),
    ("Query", 50, lambda h: h.query),
]


def format_table(rows: Sequence[Any], columns: list[Column], noun: str = "row", plural: str | None = None) -> str:
    """
    Format rows as a simple text table.

    Args:
        rows: Objects to print, one per line
        columns: (header, width, getter) per column; cells are cut to fit
        noun: What a row is, used in the total line
        plural: Plural of noun for the empty message (default: noun + "s")

    Returns:
        Formatted table string
    """
    if not rows:
        return f"No {plural or noun + 's'} found."

    width = sum(w + 1 for _, w, _ in columns)
    lines = ["-" * width, " ".join(f"{header:<{w}}" for header, w, _ in columns), "-" * width]
    for row in rows:
        lines.append(" ".join(f"{str(get(row))[:w - 1]:<{w}}" for _, w, get in columns))
    lines.append("-" * width)
    lines.append(f"Total: {len(rows)} {noun}(s)")
    return "\n".join(lines)


def _dump(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


def _print_json(value: Any) -> None:
    print(json.dumps(_dump(value), indent=2, default=str))


def _fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def _check(resource) -> None:
    if resource.error:
        _fail(resource.error)


def page_size(value: str) -> int:
    size = int(value)
    if not 1 <= size <= MAX_PAGE_SIZE:
        raise argparse.ArgumentTypeError(f"page size must be between 1 and {MAX_PAGE_SIZE}, got {size}")
    return size


def cmd_companies(app: App, args) -> None:
    request = CompanySearchRequest(search_term=args.search, page=args.page, size=args.size)
    browser = CompanyBrowser(app.companies, request)
    if args.sort_by:
        browser.set_sort(args.sort_by, args.sort_dir)
    else:
        browser.load()
    _check(browser)
    if args.search:
        app.search_history.add(args.search, "company")

    if args.json:
        _print_json(browser.page)
        return
    print(format_table(browser.companies, COMPANY_COLUMNS, "company", "companies"))
    if browser.total_elements:
        first, last = item_range(browser.params.page, browser.params.size, browser.total_elements)
        print(f"Showing {first} to {last} of {browser.total_elements} results")


def cmd_filings(app: App, args) -> None:
    page = app.filings.get_filings(
        cik=args.cik,
        form_type=args.form_type,
        date_from=args.date_from,
        date_to=args.date_to,
        page=args.page,
        size=args.size,
    )
    criteria = {"cik": args.cik, "form_type": args.form_type, "date_from": args.date_from, "date_to": args.date_to}
    if any(criteria.values()):
        query_text = " ".join(f"{k}={v}" for k, v in criteria.items() if v)
        app.search_history.add(query_text, "filing")
        app.search_history.set_last_search_request(
            FilingSearchRequest(
                cik=args.cik,
                form_types=[args.form_type] if args.form_type else None,
                date_from=args.date_from,
                date_to=args.date_to,
                page=args.page,
                size=args.size,
            )
        )

    if args.json:
        _print_json(page)
    else:
        print(format_table(page.content, FILING_COLUMNS, "filing"))


def cmd_filing(app: App, args) -> None:
    if args.accession:
        detail = app.filings.get_filing_by_accession_number(args.id)
    else:
        detail = app.filings.get_filing_by_id(args.id)

    if args.json:
        _print_json(detail)
        return
    print(f"Company: {detail.company_name} (CIK {detail.cik})")
    print(f"Form: {detail.form_type}  Filed: {detail.filing_date or '-'}  Report date: {detail.report_date or '-'}")
    print(f"Accession: {detail.accession_number}")
    if detail.url:
        print(f"URL: {detail.url}")
    if detail.content_preview:
        print()
        print(detail.content_preview)


def cmd_recent(app: App, args) -> None:
    resource = recent_filings(app.filings, args.limit).load()
    _check(resource)
    if args.json:
        _print_json(resource.data)
    else:
        print(format_table(resource.data, FILING_COLUMNS, "filing"))


def cmd_jobs(app: App, args) -> None:
    if args.active:
        jobs = app.downloads.get_active_jobs()
    else:
        resource = DownloadJobs(app.downloads, args.limit).load()
        _check(resource)
        jobs = resource.jobs

    if args.json:
        _print_json(jobs)
    else:
        print(format_table(jobs, JOB_COLUMNS, "job"))


def cmd_watch(app: App, args) -> None:
    interval = args.interval if args.interval is not None else app.settings.download_job_poll_s
    watcher = DownloadJobWatcher(app.downloads, args.job_id, interval)
    last_seen = None

    def report():
        nonlocal last_seen
        job = watcher.job
        if job is None:
            return
        line = f"{job.id}: {job.status.value} {job.progress:.0f}% ({job.files_downloaded}/{job.total_files} files)"
        if line != last_seen:
            print(line, flush=True)
            last_seen = line

    try:
        with watcher:
            report()
            while not watcher.poller.wait(timeout=interval):
                report()
            report()
    except KeyboardInterrupt:
        print("Stopped watching.", file=sys.stderr)
    _check(watcher)
    if watcher.job is not None and watcher.job.error:
        _fail(watcher.job.error)


def cmd_download_tickers(app: App, args) -> None:
    job = DownloadActions(app.downloads).download_tickers(DownloadType(args.type))
    if args.json:
        _print_json(job)
    else:
        print(f"Started job {job.id} ({job.type}): {job.status.value}")


def cmd_cancel(app: App, args) -> None:
    DownloadActions(app.downloads).cancel_job(args.job_id)
    print(f"Cancelled job {args.job_id}")


def cmd_export(app: App, args) -> None:
    criteria = None
    if args.form_type or args.cik:
        criteria = FilingSearchRequest.model_validate(
            {k: v for k, v in {"formType": args.form_type, "cik": args.cik}.items() if v}
        )
    actions = ExportActions(app.export)
    if args.format == "json":
        path = actions.export_to_json(args.ids or None, criteria, args.output_dir)
    else:
        path = actions.export_to_csv(args.ids or None, criteria, args.output_dir)
    print(f"Exported to: {path}")


def cmd_history(app: App, args) -> None:
    if args.clear:
        app.search_history.clear()
        print("Search history cleared.")
        return
    history = app.search_history.history
    if args.json:
        _print_json(history)
    else:
        print(format_table(history, HISTORY_COLUMNS, "search", "searches"))


def cmd_settings(app: App, args) -> None:
    if args.server:
        resource = SettingsResource(app.server_settings).load()
        _check(resource)
        resource.check_connections()
        _print_json(resource.settings)
        return

    if args.reset:
        app.ui_settings.clear()
    if args.set:
        changes = {}
        for assignment in args.set:
            key, sep, value = assignment.partition("=")
            if not sep:
                _fail(f"Expected KEY=VALUE, got '{assignment}'")
            changes[key.strip().replace("-", "_")] = value.strip()
        app.ui_settings.update_all(**changes)

    settings = app.ui_settings.settings
    if args.json:
        _print_json(settings)
    else:
        for key, value in settings.model_dump().items():
            print(f"{key:<22} {value}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sec-dashboard",
        description="SEC Dashboard - browse companies, filings and download jobs from the dashboard backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s companies Apple --size 5
  %(prog)s filings --cik 320193 --form 10-K
  %(prog)s watch 3f2b9c1e --interval 2
  %(prog)s export --form 10-K --format csv
        """
    )
    parser.add_argument('--api-url', help='Backend root URL (default: $SEC_DASHBOARD_API_URL or http://localhost:8080)')
    parser.add_argument('--log-level', help='Log level (default: $LOG_LEVEL or INFO)')
    parser.add_argument('--json', action='store_true', help='Output results as JSON instead of table')

    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('companies', help='List or search companies')
    p.add_argument('search', nargs='?', help='Company name to search for')
    p.add_argument('--page', type=int, default=0, help='Page number, 0-based (default: 0)')
    p.add_argument('--size', type=page_size, default=DEFAULT_PAGE_SIZE, help=f'Page size (default: {DEFAULT_PAGE_SIZE})')
    p.add_argument('--sort-by', help='Sort field, e.g. name or cik')
    p.add_argument('--sort-dir', choices=['asc', 'desc'], default='asc')
    p.set_defaults(func=cmd_companies)

    p = sub.add_parser('filings', help='List filings with optional filters')
    p.add_argument('--cik', help='Company CIK')
    p.add_argument('--form', dest='form_type', help='Form type, e.g. 10-K')
    p.add_argument('--date-from', help='Filed on or after this date (YYYY-MM-DD)')
    p.add_argument('--date-to', help='Filed on or before this date (YYYY-MM-DD)')
    p.add_argument('--page', type=int, help='Page number, 0-based')
    p.add_argument('--size', type=page_size, help=f'Page size, at most {MAX_PAGE_SIZE}')
    p.set_defaults(func=cmd_filings)

    p = sub.add_parser('filing', help='Show one filing')
    p.add_argument('id', help='Filing id, or accession number with --accession')
    p.add_argument('--accession', action='store_true', help='Treat ID as an accession number')
    p.set_defaults(func=cmd_filing)

    p = sub.add_parser('recent', help='Most recent filings')
    p.add_argument('--limit', type=int, default=10, help='Maximum number of results (default: 10)')
    p.set_defaults(func=cmd_recent)

    p = sub.add_parser('jobs', help='List download jobs')
    p.add_argument('--active', action='store_true', help='Only pending and running jobs')
    p.add_argument('--limit', type=int, default=10, help='Maximum number of jobs (default: 10)')
    p.set_defaults(func=cmd_jobs)

    p = sub.add_parser('watch', help='Follow a download job until it finishes')
    p.add_argument('job_id')
    p.add_argument('--interval', type=float, help='Seconds between polls (default: $SEC_DASHBOARD_DOWNLOAD_JOB_POLL_S)')
    p.set_defaults(func=cmd_watch)

    p = sub.add_parser('download-tickers', help='Start a ticker list download')
    p.add_argument(
        '--type',
        choices=[t.value for t in DownloadType if t.value.startswith('TICKERS_')],
        default=DownloadType.TICKERS_ALL.value,
    )
    p.set_defaults(func=cmd_download_tickers)

    p = sub.add_parser('cancel', help='Cancel a download job')
    p.add_argument('job_id')
    p.set_defaults(func=cmd_cancel)

    p = sub.add_parser('export', help='Export filings to CSV or JSON')
    p.add_argument('--format', choices=['csv', 'json'], default='csv')
    p.add_argument('--id', dest='ids', action='append', help='Filing id to export (can be repeated)')
    p.add_argument('--form', dest='form_type', help='Export filings of this form type')
    p.add_argument('--cik', help='Export filings of this company')
    p.add_argument('--output-dir', help='Directory for the exported file (default: $SEC_DASHBOARD_EXPORT_DIR)')
    p.set_defaults(func=cmd_export)

    p = sub.add_parser('history', help='Show recent searches')
    p.add_argument('--clear', action='store_true', help='Forget all recent searches')
    p.set_defaults(func=cmd_history)

    p = sub.add_parser('settings', help='Show or change local preferences')
    p.add_argument('--set', action='append', metavar='KEY=VALUE', help='Change a preference (can be repeated)')
    p.add_argument('--reset', action='store_true', help='Restore default preferences')
    p.add_argument('--server', action='store_true', help='Show backend settings and connection status instead')
    p.set_defaults(func=cmd_settings)

    return parser


def main(argv: Sequence[str] | None = None, app: App | None = None):
    """
    Main CLI entry point.

    Usage:
        sec-dashboard companies Apple --size 5
        sec-dashboard --json filings --cik 320193 --form 10-K
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if app is None:
        settings = DashboardSettings()
        if args.api_url:
            settings = settings.model_copy(update={"api_url": args.api_url})
        app = build_app(settings)

    try:
        with app:
            args.func(app, args)
    except (ApiError, ValueError) as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
