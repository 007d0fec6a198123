"""CLI interface for the Bitbucket client."""

import asyncio
import json
import logging
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from bitbucket_client import __version__
from bitbucket_client.config import get_config
from bitbucket_client.exceptions import BitbucketAPIError
from bitbucket_client.services.bitbucket_client import BitbucketClientV2

app = typer.Typer(
    name="bitbucket-client",
    help="Browse Bitbucket repositories, pull requests and teams",
    add_completion=False,
)

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"bitbucket-client version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every request"),
):
    """Bitbucket Client - Browse the Bitbucket REST API from the terminal."""
    setup_logging(verbose)


def _client() -> BitbucketClientV2:
    config = get_config()
    return BitbucketClientV2(token=config.token, config=config)


def _run(coro) -> Any:
    """Run a coroutine, turning API errors into a clean exit."""
    try:
        return asyncio.run(coro)
    except BitbucketAPIError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


def _print_json(records: Any) -> None:
    if isinstance(records, list):
        data = [record.model_dump(mode="json", exclude_none=True) for record in records]
    else:
        data = records.model_dump(mode="json", exclude_none=True)
    console.print_json(json.dumps(data))


@app.command()
def repos(
    account: str = typer.Argument(..., help="Account or team that owns the repositories"),
    max_items: int = typer.Option(0, "--max", "-m", help="Maximum repositories (0 for all)"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
):
    """List the repositories of an account."""
    items = _run(_client().repositories_end_point().list_repositories(account, max=max_items))

    if as_json:
        _print_json(items)
        return

    table = Table(title=f"Repositories of {account}")
    table.add_column("Name", style="cyan")
    table.add_column("Language")
    table.add_column("Private")
    table.add_column("Updated")
    for repo in items:
        table.add_row(
            repo.full_name or repo.name or "",
            repo.language or "",
            "yes" if repo.is_private else "no",
            repo.updated_on.strftime("%Y-%m-%d") if repo.updated_on else "",
        )
    console.print(table)


@app.command()
def repo(
    account: str = typer.Argument(..., help="Repository owner"),
    slug: str = typer.Argument(..., help="Repository slug"),
):
    """Show one repository as JSON."""
    resource = _client().repositories_end_point().repository_resource(account, slug)
    result = _run(resource.get_repository())

    if not result.ok:
        console.print(f"[red]Error: {result.error}[/red]")
        raise typer.Exit(1)
    if result.value is None:
        console.print(f"[yellow]No data returned for {account}/{slug}[/yellow]")
        raise typer.Exit(1)
    _print_json(result.value)


@app.command()
def pull_requests(
    account: str = typer.Argument(..., help="Repository owner"),
    slug: str = typer.Argument(..., help="Repository slug"),
    max_items: int = typer.Option(0, "--max", "-m", help="Maximum pull requests (0 for all)"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
):
    """List the open pull requests of a repository."""
    resource = _client().repositories_end_point().pull_requests_resource(account, slug)
    items = _run(resource.list_pull_requests(max=max_items))

    if as_json:
        _print_json(items)
        return

    table = Table(title=f"Pull requests of {account}/{slug}")
    table.add_column("#", justify="right")
    table.add_column("Title", style="cyan")
    table.add_column("Author")
    table.add_column("State")
    for pr in items:
        author = pr.author.display_name if pr.author else ""
        table.add_row(str(pr.id or ""), pr.title or "", author or "", pr.state or "")
    console.print(table)


@app.command()
def team_members(
    team: str = typer.Argument(..., help="Team name"),
    max_items: int = typer.Option(0, "--max", "-m", help="Maximum members (0 for all)"),
):
    """List the members of a team."""
    members = _run(_client().teams_end_point(team).list_members(max=max_items))

    table = Table(title=f"Members of {team}")
    table.add_column("Username", style="cyan")
    table.add_column("Display name")
    for member in members:
        table.add_row(member.username or member.nickname or "", member.display_name or "")
    console.print(table)


@app.command()
def check_token(
    show_url: bool = typer.Option(False, "--show-url", help="Also print the API URL"),
):
    """Check Bitbucket token configuration."""
    config = get_config()

    if config.is_authenticated:
        console.print("[green]Bitbucket token is configured[/green]")
    else:
        console.print("[yellow]No Bitbucket token configured[/yellow]")
        console.print("Only public resources are reachable.")
        console.print()
        console.print("To configure a token:")
        console.print("  export BITBUCKET_TOKEN=your_token_here")

    if show_url:
        console.print(f"API: {config.api_v2_url}")


if __name__ == "__main__":
    app()
