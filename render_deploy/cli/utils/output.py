# render_deploy/cli/utils/output.py
"""Output formatting utilities"""

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ...core.prerequisites import ToolStatus
from ...models import DeployResult

console = Console()


def format_deploy_result(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    lines = [
        f"[green]✓[/green] {result.message or 'Deployment completed'}",
        "",
    ]

    if result.repository:
        lines.append(f"[bold]Repository:[/bold] {result.remote_url or 'N/A'} "
                     f"({result.repository.outcome.value})")
    if result.pushed_branch:
        lines.append(f"[bold]Branch:[/bold] {result.pushed_branch}")
    if result.use_mock_data is not None:
        lines.append(f"[bold]Mock data:[/bold] {'yes' if result.use_mock_data else 'no'}")
    if result.duration is not None:
        lines.append(f"[bold]Duration:[/bold] {result.duration:.1f}s")

    for warning in result.warnings:
        lines.append(f"[yellow]• {warning}[/yellow]")

    panel = Panel(
        "\n".join(lines),
        title="Deploy Result",
        border_style="green"
    )
    console.print(panel)


def format_tool_statuses(statuses: List[ToolStatus]) -> Table:
    """Build the prerequisite results table"""
    table = Table(title="Prerequisites", box=box.ROUNDED)
    table.add_column("Tool", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Version")
    table.add_column("Details")

    for status in statuses:
        if status.ok:
            label = "[green]✓ OK[/green]"
        elif status.found:
            label = "[yellow]⚠ OLD[/yellow]"
        else:
            label = "[red]✗ MISSING[/red]"
        table.add_row(status.name, label, status.version or "-", status.message)

    return table


def format_yaml(text: str, title: Optional[str] = None) -> None:
    """Display YAML text with syntax highlighting"""
    syntax = Syntax(text, "yaml", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=title, border_style="blue")
        console.print(panel)
    else:
        console.print(syntax)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {message}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]Success:[/green] {message}")
