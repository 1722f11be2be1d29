"""Workspace publish CLI.

Publish a project directory to GitHub and manage its repo metadata.
"""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from cli.workspacepublish.output import (
    configure_logging,
    console,
    create_spinner,
    print_error,
    print_info,
    print_key_value,
    print_repo_display,
    print_section,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="wsp",
    help="Workspace publish - push generated projects to GitHub",
    no_args_is_help=True,
)

# Config sub-app
config_app = typer.Typer(
    name="config",
    help="Inspect configuration settings.",
)
app.add_typer(config_app, name="config")

ProjectIdOption = typer.Option(
    None,
    "--project-id",
    "-p",
    help="Backend project id (default: WORKSPACE_PROJECT_ID or config)",
)


def _load(config_path: Optional[Path] = None):
    from settings.config import get_config, load_config

    config = load_config(config_path) if config_path else get_config()
    configure_logging(config.logging.level)
    return config


async def _start_session(config, project_id: Optional[str]):
    from tools.notifier import ConsoleNotifier
    from workspace.session import WorkspaceSession

    return await WorkspaceSession.start(
        config,
        project_id=project_id,
        notifier=ConsoleNotifier(console),
    )


@app.command()
def publish(
    path: Path = typer.Argument(
        Path("."),
        help="Project directory to publish",
    ),
    project_id: Optional[str] = ProjectIdOption,
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Set the target branch before publishing",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to workspace.toml",
    ),
) -> None:
    """Publish a project directory to GitHub.

    Examples:
        wsp publish ./my-app --project-id p1
        wsp publish ./my-app -p p1 --branch develop
    """
    from orchestrator.checkpoints import BranchPrompt
    from workspace.files import snapshot_directory

    config = _load(config_path)

    try:
        files = snapshot_directory(path)
    except NotADirectoryError as e:
        print_error(str(e))
        raise typer.Exit(1)

    async def _run():
        session = await _start_session(config, project_id)
        session.replace_files(files)
        if branch:
            await session.change_branch(BranchPrompt(answer=branch))

        print_info(f"Publishing {len(session.workspace.files)} file(s) from {path}")
        with create_spinner("Processing...") as spinner:
            spinner.add_task("Processing...", total=None)
            outcome = await session.publish()
        await session.drain()
        return session, outcome

    session, outcome = asyncio.run(_run())

    if not outcome.succeeded:
        raise typer.Exit(1)

    print_success(f"Repository: {session.metadata.name}")
    if outcome.repo_url:
        print_info(f"URL: {outcome.repo_url}")


@app.command()
def branch(
    name: Optional[str] = typer.Argument(
        None,
        help="New branch name (prompted when omitted)",
    ),
    project_id: Optional[str] = ProjectIdOption,
) -> None:
    """Change the target branch for future publishes.

    Examples:
        wsp branch develop -p p1
        wsp branch -p p1          # prompts, pre-filled with the current branch
    """
    from orchestrator.checkpoints import BranchPrompt

    config = _load()

    async def _run() -> bool:
        session = await _start_session(config, project_id)
        changed = await session.change_branch(BranchPrompt(console=console, answer=name))
        await session.drain()
        return changed

    if not asyncio.run(_run()):
        print_warning("Branch unchanged")


@app.command("open")
def open_repo(project_id: Optional[str] = ProjectIdOption) -> None:
    """Open the published repository in a browser."""
    config = _load()

    async def _run() -> bool:
        session = await _start_session(config, project_id)
        return session.open_repo()

    if not asyncio.run(_run()):
        raise typer.Exit(1)


@app.command("copy-url")
def copy_url(project_id: Optional[str] = ProjectIdOption) -> None:
    """Copy the repository URL to the clipboard."""
    config = _load()

    async def _run() -> bool:
        session = await _start_session(config, project_id)
        return await session.copy_repo_url()

    if not asyncio.run(_run()):
        raise typer.Exit(1)


@app.command()
def status(
    path: Optional[Path] = typer.Argument(
        None,
        help="Project directory to count files in",
    ),
    project_id: Optional[str] = ProjectIdOption,
) -> None:
    """Show repo metadata for a project and check the publish endpoint."""
    from workspace.files import snapshot_directory

    config = _load()

    files = None
    if path is not None:
        try:
            files = snapshot_directory(path)
        except NotADirectoryError as e:
            print_error(str(e))
            raise typer.Exit(1)

    async def _run():
        session = await _start_session(config, project_id)
        session.replace_files(files)
        reachable = await session.provider.validate_connection()
        return session, reachable

    session, reachable = asyncio.run(_run())
    print_repo_display(
        session.repo_display(),
        session.project_id,
        len(session.workspace.files),
    )
    if reachable:
        print_success(f"Publish endpoint reachable ({session.provider.name})")
    else:
        print_warning(f"Publish endpoint unreachable at {config.api.base_url}")


@config_app.command("show")
def config_show(
    section: Optional[str] = typer.Argument(
        None,
        help="Config section to show (api, publish, editor, logging)",
    ),
) -> None:
    """Show current configuration.

    Examples:
        wsp config show           # Show all config
        wsp config show api       # Show API section only
    """
    from settings.config import find_config_file, get_config

    config_path = find_config_file()
    if config_path:
        print_info(f"Config file: {config_path}")
    else:
        print_warning("No workspace.toml found (using defaults)")

    config = get_config()
    section_map = {
        "api": config.api,
        "publish": config.publish,
        "editor": config.editor,
        "logging": config.logging,
    }

    if section:
        section_lower = section.lower()
        if section_lower not in section_map:
            print_error(f"Unknown section: {section}")
            print_info(f"Available: {', '.join(section_map.keys())}")
            raise typer.Exit(1)
        print_section(section_lower, section_map[section_lower])
        return

    for name, section_config in section_map.items():
        print_section(name, section_config)
    if config.project_id:
        print_key_value("project_id", config.project_id)


@app.command()
def version() -> None:
    """Show version."""
    from cli.workspacepublish import __version__

    console.print(f"workspace-publish v{__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
