# deploy_pipeline/cli/utils/output.py
"""Output formatting utilities"""

from typing import Any, Dict, List

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ...models import DeployResult

console = Console()


def format_deploy_result(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    if result.success:
        lines = [
            f"[green]✓[/green] Deployment '{result.deployment}' updated successfully!",
            f"",
            f"[bold]Uploaded releases:[/bold] {len(result.uploaded_releases)}",
            f"[bold]Skipped releases:[/bold] {len(result.skipped_releases)}",
        ]

        if result.update_request:
            lines.append(f"[bold]Recreate:[/bold] {'yes' if result.update_request.recreate else 'no'}")
            lines.append(f"[bold]Skip drain:[/bold] {result.update_request.skip_drain.describe()}")

        lines.append(f"[bold]Duration:[/bold] {result.duration:.1f}s")

        panel = Panel(
            "\n".join(lines),
            title="Deploy Result",
            border_style="green"
        )
        console.print(panel)

    else:
        lines = [
            f"[red]✗ Deploy failed:[/red] {result.error}",
            f"",
            f"[bold]Stopped in state:[/bold] {result.state.value}",
        ]
        if result.error_code:
            lines.append(f"[bold]Error code:[/bold] {result.error_code}")

        # Uploads are not rolled back, make that visible
        if result.uploaded_releases:
            lines.append(
                f"[yellow]Releases uploaded before the failure:[/yellow] "
                f"{', '.join(result.uploaded_releases)}"
            )

        panel = Panel(
            "\n".join(lines),
            title="Deploy Error",
            border_style="red"
        )
        console.print(panel)


def format_releases(releases: List[Dict[str, Any]]) -> None:
    """Display registered releases as a table"""
    if not releases:
        console.print("[yellow]No releases registered[/yellow]")
        return

    table = Table(title="Releases", box=box.SIMPLE)
    table.add_column("Name", style="cyan")
    table.add_column("Version", style="green")
    table.add_column("SHA1", style="dim")
    table.add_column("Uploaded", style="yellow")

    for release in releases:
        table.add_row(
            release.get('name', ''),
            release.get('version', ''),
            release.get('sha1') or '-',
            release.get('uploaded_at', '')[:16].replace('T', ' ')
        )

    console.print(table)
