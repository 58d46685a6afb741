"""CLI entry point for ghmanager.

The repository commands are thin forwarders to GitHubClient, the same
search / get-repo / get-issues / get-pulls surface the dashboard uses.
"""

from __future__ import annotations

import json
import logging
import subprocess
import sys
from pathlib import Path

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ghmanager.config import Config
from ghmanager.credentials import CredentialStore, client_factory_for
from ghmanager.github.errors import ClientNotInitializedError, GitHubError
from ghmanager.github.models import Issue, PullRequest, RepositorySummary
from ghmanager.storage.db import get_connection
from ghmanager.storage.settings import SettingsStore

app = typer.Typer(help="Browse GitHub repositories, issues and pull requests.")
token_app = typer.Typer(help="Manage the stored GitHub token.")
app.add_typer(token_app, name="token")

FORMAT_OPTION = typer.Option("text", "--format", "-f", help="Output format: text or json")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API calls"),
) -> None:
    config = Config.load()
    level = "DEBUG" if verbose else config.log_level
    if not isinstance(logging.getLevelName(level), int):
        level = "WARNING"
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_config() -> Config:
    config = Config.load()
    issues = config.validate()
    if issues:
        for issue in issues:
            rprint(f"[red]Config error: {issue}[/red]")
        raise typer.Exit(1)
    return config


def _split_repo(full_name: str) -> tuple[str, str]:
    owner, _, name = full_name.partition("/")
    if not owner or not name or "/" in name:
        raise typer.BadParameter(f"Expected OWNER/NAME, got {full_name!r}")
    return owner, name


def _fail(error: GitHubError) -> None:
    rprint(f"[red]Error: {escape(error.message)}[/red]")
    if isinstance(error, ClientNotInitializedError):
        rprint("Run [bold]ghmanager token set[/bold] first.")
    raise typer.Exit(1)


def _emit_json(payload) -> None:
    typer.echo(json.dumps(payload, indent=2))


@token_app.command("set")
def token_set(
    token: str = typer.Option(
        ..., prompt=True, hide_input=True, help="GitHub personal access token"
    ),
) -> None:
    """Validate a token against GitHub and store it."""
    config = _load_config()
    conn = get_connection(config.db_path)
    store = CredentialStore(SettingsStore(conn), client_factory_for(config))
    try:
        user = store.set_token(token)
        rprint(f"[green]Token saved.[/green] Authenticated as [bold]{user.login}[/bold]")
    except GitHubError as e:
        _fail(e)
    finally:
        store.client.close()
        conn.close()


@token_app.command("clear")
def token_clear() -> None:
    """Remove the stored token."""
    config = _load_config()
    conn = get_connection(config.db_path)
    try:
        CredentialStore(SettingsStore(conn), client_factory_for(config)).clear_token()
        rprint("Token cleared.")
    finally:
        conn.close()


@token_app.command("status")
def token_status() -> None:
    """Show whether a token is stored."""
    config = _load_config()
    conn = get_connection(config.db_path)
    try:
        store = CredentialStore(SettingsStore(conn), client_factory_for(config))
        if store.is_initialized():
            rprint("[green]GitHub token: configured[/green]")
        else:
            rprint("[yellow]GitHub token: not set[/yellow]")
    finally:
        conn.close()


def _with_client(action):
    """Run action(client) against the stored token, closing everything after."""
    config = _load_config()
    conn = get_connection(config.db_path)
    client = CredentialStore(SettingsStore(conn), client_factory_for(config)).client
    try:
        return action(client)
    except GitHubError as e:
        _fail(e)
    finally:
        client.close()
        conn.close()


def _print_summary(repo: RepositorySummary) -> None:
    language = f" [cyan]{repo.language}[/cyan]" if repo.language else ""
    rprint(f"[bold]{repo.full_name}[/bold]  ⭐ {repo.stargazers_count}{language}")
    rprint(f"  {escape(repo.description or 'No description available')}")
    rprint(f"  {repo.html_url}")


def _print_issue(issue: Issue, status: str) -> None:
    author = f" by {issue.user.login}" if issue.user else ""
    labels = ", ".join(label.name for label in issue.labels)
    rprint(f"[bold]#{issue.number}[/bold] ({status}) {escape(issue.title)}{author}")
    if labels:
        rprint(f"  labels: {escape(labels)}")


@app.command()
def search(
    query: str = typer.Argument(help="Repository search query"),
    format: str = FORMAT_OPTION,
) -> None:
    """Search GitHub repositories."""
    repos = _with_client(lambda client: client.search_repositories(query))
    if format == "json":
        _emit_json([r.to_dict() for r in repos])
        return
    if not repos:
        rprint("No repositories found")
    for repo in repos:
        _print_summary(repo)


@app.command()
def repo(
    full_name: str = typer.Argument(help="Repository (owner/name)"),
    format: str = FORMAT_OPTION,
) -> None:
    """Show a repository."""
    owner, name = _split_repo(full_name)
    detail = _with_client(lambda client: client.get_repository(owner, name))
    if format == "json":
        _emit_json(detail.to_dict())
        return
    _print_summary(detail)
    rprint(f"  Forks: {detail.forks_count}  Open issues: {detail.open_issues_count}")
    rprint(f"  Default branch: {detail.default_branch}  Created: {detail.created_at[:10]}")
    if detail.topics:
        rprint(f"  Topics: {', '.join(detail.topics)}")


@app.command()
def issues(
    full_name: str = typer.Argument(help="Repository (owner/name)"),
    format: str = FORMAT_OPTION,
) -> None:
    """List open and closed issues of a repository."""
    owner, name = _split_repo(full_name)
    found = _with_client(lambda client: client.list_issues(owner, name))
    if format == "json":
        _emit_json([i.to_dict() for i in found])
        return
    if not found:
        rprint("No issues found")
    for issue in found:
        _print_issue(issue, issue.state)


@app.command()
def pulls(
    full_name: str = typer.Argument(help="Repository (owner/name)"),
    detailed: bool = typer.Option(
        False, help="Fetch each PR to include merge state and change counts"
    ),
    format: str = FORMAT_OPTION,
) -> None:
    """List open, closed and merged pull requests of a repository."""
    owner, name = _split_repo(full_name)
    found = _with_client(
        lambda client: client.list_pull_requests(owner, name, detailed=detailed)
    )
    if format == "json":
        _emit_json([pr.to_dict() for pr in found])
        return
    if not found:
        rprint("No pull requests found")
    for pr in found:
        _print_issue(pr, pr.status)
        if detailed:
            _print_pull_stats(pr)


def _print_pull_stats(pr: PullRequest) -> None:
    rprint(
        f"  comments: {pr.total_comments}  commits: {pr.commits}  "
        f"[green]+{pr.additions}[/green] [red]-{pr.deletions}[/red]  "
        f"files: {pr.changed_files}"
    )


@app.command()
def ui() -> None:
    """Launch the Streamlit dashboard."""
    app_path = Path(__file__).resolve().parent / "ui" / "app.py"
    raise typer.Exit(
        subprocess.call([sys.executable, "-m", "streamlit", "run", str(app_path)])
    )


if __name__ == "__main__":
    app()
