"""CLI entry point for calctest."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

import click
from colorama import just_fix_windows_console

from calctest import __version__, bootstrap
from calctest.arithmetic import OPERATIONS, evaluate
from calctest.core import CaseRegistry, TestRunner
from calctest.core.registry import registry as default_registry
from calctest.plan import PlanOptions, build_registry, load_plan, select_cases
from calctest.reporting import JsonReporter, ReportManager, Reporter, TerminalReporter
from calctest.suites import BUILTIN_SUITES, load_suite


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

logger = logging.getLogger(__name__)


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"calctest {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the calctest version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Top level CLI group for calctest."""

    _configure_logging(verbose)
    bootstrap()
    ctx.obj = CliState(verbose=verbose)


@cli.command()
@click.option(
    "--suite",
    "suites",
    multiple=True,
    help=f"Suite to run: {', '.join(sorted(BUILTIN_SUITES))} or a module path (repeatable).",
)
@click.option(
    "--plan",
    "plan_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML plan file listing suites and cases.",
)
@click.option("--cases", "case_filters", type=str, help="Comma-separated case filters (supports globs).")
@click.option("--tags", "tag_filters", type=str, help="Comma-separated tags to include.")
@click.option("--skip-tags", "skip_tag_filters", type=str, help="Comma-separated tags to skip.")
@click.option("--list", "list_only", is_flag=True, help="List matched cases without running.")
@click.option("--fail-fast", is_flag=True, help="Stop after the first case that does not pass.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def run(
    state: CliState,
    suites: Tuple[str, ...],
    plan_path: Optional[str],
    case_filters: Optional[str],
    tag_filters: Optional[str],
    skip_tag_filters: Optional[str],
    list_only: bool,
    fail_fast: bool,
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Run test cases and print the report."""

    options = PlanOptions(
        cases=_split_csv(case_filters),
        tags=_split_csv(tag_filters),
        skip_tags=_split_csv(skip_tag_filters),
        list_only=list_only,
    )
    try:
        registry = _collect_cases(suites, plan_path)
    except Exception as exc:  # pragma: no cover - CLI error translation
        logger.debug("Case collection failed", exc_info=exc)
        raise click.ClickException(str(exc)) from exc

    cases = select_cases(registry.cases(), options)
    if options.list_only:
        for case in cases:
            click.echo(case.name)
        raise click.exceptions.Exit(0)
    if not cases:
        click.echo("No cases matched the provided filters.")
        raise click.exceptions.Exit(1)

    if not no_color:
        just_fix_windows_console()
    reporter: Reporter
    if report_format == "json":
        reporter = JsonReporter(path=report_path)
    else:
        reporter = TerminalReporter(use_color=not no_color)
    manager = ReportManager([reporter])
    manager.start(cases)
    report = TestRunner(registry, fail_fast=fail_fast).run(cases, on_result=manager.handle_result)
    manager.complete(report)
    raise click.exceptions.Exit(0 if report.ok else 1)


@cli.command()
@click.argument("operation", type=click.Choice(sorted(OPERATIONS)))
@click.argument("a", type=int)
@click.argument("b", type=int)
def calc(operation: str, a: int, b: int) -> None:
    """Evaluate OPERATION on integers A and B."""

    result = evaluate(operation, a, b)
    if not result.ok:
        raise click.ClickException(f"{result.error}: {result.message}")
    click.echo(str(result.value))


def _collect_cases(suites: Tuple[str, ...], plan_path: Optional[str]) -> CaseRegistry:
    registry = CaseRegistry()
    for case in default_registry:
        registry.add(case)
    if plan_path:
        build_registry(load_plan(plan_path), registry)
    selected = suites or (() if plan_path or len(registry) else ("calculator",))
    for name in selected:
        load_suite(name, registry)
    return registry


def _split_csv(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return tuple()
    parts = [part.strip() for part in value.split(",") if part.strip()]
    return tuple(parts)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="calctest", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
