"""CLI interface for create-basinas"""

import logging
import os
import re
from pathlib import Path
from typing import Optional

import click

from basinas.application.error_guidance import describe_failure
from basinas.application.scaffold_plan import build_plan, find_step
from basinas.application.scaffold_service import ScaffoldService
from basinas.domain.models.report import ScaffoldReport
from basinas.infrastructure.config.config_manager import ConfigManager, ConfigurationError
from basinas.infrastructure.process_executor import ProcessRetryExecutor, retry_policy_from_config

logger = logging.getLogger(__name__)

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[BaseException] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


def _validate_project_name(ctx, param, value: str) -> str:
    if not PROJECT_NAME_PATTERN.match(value):
        raise click.BadParameter(
            "Project name must contain only lowercase letters, numbers, and hyphens"
        )
    return value


def _load_config(ctx) -> ConfigManager:
    verbose = ctx.obj.get("verbose", False)
    try:
        return ConfigManager(config_path=ctx.obj.get("config_path"))
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)


def _output_report(report: ScaffoldReport) -> None:
    click.echo("\nSetup complete! To start developing:")
    click.echo(f"  cd {report.project_name}")
    click.echo("  npm run dev")
    click.echo(
        f"\n{len(report.steps_run)} steps, {len(report.files_written)} files written, "
        f"{report.rules_applied} patches applied ({report.rules_skipped} already present)"
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, path_type=Path),
    help="Path to .basinas.yml config file",
)
@click.pass_context
def cli(ctx, verbose: bool, config: Path):
    """create-basinas - Next.js 16 app with shadcn/ui pre-configured

    \b
    Features:
      - Next.js 16 with TypeScript
      - Turbopack for faster development
      - Biome for linting and formatting
      - shadcn/ui with all components
      - Tailwind CSS and App Router
      - Dark mode support with next-themes
      - Fumadocs documentation with an isolated layout
    """
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("project_name", callback=_validate_project_name)
@click.option(
    "--directory",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory in which the project directory is created",
)
@click.option("--step", "step_label", type=str, help="Run only the step with this label")
@click.pass_context
def create(ctx, project_name: str, directory: Path, step_label: Optional[str]):
    """Create a new project.

    PROJECT_NAME: Lowercase letters, numbers and hyphens (e.g. my-app)
    """
    verbose = ctx.obj.get("verbose", False) or bool(os.getenv("DEBUG"))
    config_manager = _load_config(ctx)

    plan = build_plan(project_name, config_manager.config)
    executor = ProcessRetryExecutor(retry_policy_from_config(config_manager.get_retry_config()))
    service = ScaffoldService(project_name, directory.resolve(), executor=executor)

    if step_label:
        try:
            find_step(plan, step_label)
        except ValueError as e:
            _die(str(e), verbose=verbose, exc=e)

    logger.info(f"Creating {project_name} in {service.parent_dir}")
    try:
        if step_label:
            report = service.run_step(plan, step_label)
        else:
            report = service.run(plan)
    except Exception as e:
        click.echo(f"\nError during setup: {e}", err=True)
        click.echo(describe_failure(e, project_name), err=True)
        _die(f"Setup of {project_name} failed", verbose=verbose, exc=e)

    if step_label:
        click.echo(f"Step completed: {report.steps_run[0]}")
    else:
        _output_report(report)


@cli.command()
@click.argument("project_name", callback=_validate_project_name)
@click.pass_context
def steps(ctx, project_name: str):
    """List the scaffold steps in execution order.

    PROJECT_NAME: Project the plan is built for
    """
    config_manager = _load_config(ctx)
    for index, step in enumerate(build_plan(project_name, config_manager.config), 1):
        click.echo(f"{index:2d}. {step.label}")


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
