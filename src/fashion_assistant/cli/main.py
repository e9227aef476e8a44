"""Main CLI application."""

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from fashion_assistant import __version__
from fashion_assistant.config import get_settings
from fashion_assistant.core.errors import ProvisioningError
from fashion_assistant.core.provisioning import (
    ProvisionedAgents,
    ProvisioningContext,
    load_and_patch_spec,
    probe_cart_api,
    provision_agents,
    resolve_server_url,
)
from fashion_assistant.infrastructure.agent_service import agents_client
from fashion_assistant.infrastructure.observability.logging import setup_logging

app = typer.Typer(
    name="fashion-assistant",
    help="Fashion store agent provisioning CLI",
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-v", help="Show version and exit"
    ),
) -> None:
    """Fashion store agent provisioning CLI."""
    if version:
        console.print(f"fashion-assistant version {__version__}")
        raise typer.Exit()


@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload"),
) -> None:
    """Start the API server.

    The store app serving /api/Cart runs separately; point SERVER_URL (or the
    App Service WEBSITE_* variables) at it before provisioning.
    """
    import uvicorn

    console.print(f"[green]Starting API server on {host}:{port}[/green]")

    uvicorn.run(
        "fashion_assistant.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _print_results(provisioned: ProvisionedAgents) -> None:
    table = Table(title=f"Provisioning run {provisioned.run_id}")
    table.add_column("Role", style="cyan")
    table.add_column("Agent ID", style="green")
    table.add_column("Error", style="red")

    for role, result in provisioned.results.items():
        table.add_row(
            role.value,
            result.agent_id or "-",
            result.error.message if result.error else "",
        )
    console.print(table)


@app.command()
def provision() -> None:
    """Create the orchestrator and specialist agents."""
    settings = get_settings()
    setup_logging(settings.telemetry)

    async def run() -> ProvisionedAgents:
        context = ProvisioningContext.from_settings(settings)
        async with agents_client(settings.agent_service) as client:
            return await provision_agents(client, context)

    try:
        provisioned = asyncio.run(run())
    except ProvisioningError as e:
        console.print(f"[red]Provisioning failed ({e.error_code}): {e.message}[/red]")
        raise typer.Exit(1)

    _print_results(provisioned)
    if not provisioned.is_complete:
        console.print("[yellow]Some agents were not created[/yellow]")
        raise typer.Exit(1)
    console.print("[green]All agents provisioned[/green]")


@app.command(name="resolve-url")
def resolve_url() -> None:
    """Print the server URL the cart API tool will point at."""
    settings = get_settings()
    console.print(resolve_server_url(settings.hosting))


@app.command()
def check() -> None:
    """Check the API specification and cart API without creating agents."""
    settings = get_settings()
    setup_logging(settings.telemetry)
    context = ProvisioningContext.from_settings(settings)
    all_ok = True

    console.print(f"Server URL: [cyan]{context.server_url}[/cyan]")

    console.print("Loading API specification...", end=" ")
    try:
        load_and_patch_spec(context.server_url, list(context.spec_paths))
        console.print("[green]OK[/green]")
    except ProvisioningError as e:
        console.print(f"[red]FAILED: {e.message}[/red]")
        all_ok = False

    console.print("Probing cart API...", end=" ")
    try:
        asyncio.run(probe_cart_api(context.server_url, timeout=context.probe_timeout))
        console.print("[green]OK[/green]")
    except ProvisioningError as e:
        console.print(f"[red]FAILED: {e.message}[/red]")
        all_ok = False

    if all_ok:
        console.print("\n[green]All checks passed![/green]")
    else:
        console.print("\n[red]Some checks failed![/red]")
        raise typer.Exit(1)


@app.command()
def cleanup(
    agent_ids: list[str] = typer.Argument(..., help="IDs of agents to delete"),
) -> None:
    """Delete agents left behind by a partial provisioning run."""
    settings = get_settings()

    async def run() -> int:
        failures = 0
        async with agents_client(settings.agent_service) as client:
            for agent_id in agent_ids:
                try:
                    await client.delete_agent(agent_id)
                    console.print(f"[green]Deleted {agent_id}[/green]")
                except Exception as e:
                    console.print(f"[red]Failed to delete {agent_id}: {e}[/red]")
                    failures += 1
        return failures

    try:
        failures = asyncio.run(run())
    except ProvisioningError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1)
    if failures:
        raise typer.Exit(1)


@app.command()
def config() -> None:
    """Show current configuration."""
    settings = get_settings()

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Agent Service Endpoint", settings.agent_service.project_endpoint or "-")
    table.add_row("Model Deployment", settings.model.model_deployment_name)
    table.add_row("Resolved Server URL", resolve_server_url(settings.hosting))
    table.add_row("Spec Path Override", str(settings.provisioning.spec_path or "-"))
    table.add_row("Probe Timeout", f"{settings.provisioning.probe_timeout}s")
    table.add_row("API Port", str(settings.api.port))
    table.add_row("Telemetry Enabled", str(settings.telemetry.enabled))

    console.print(table)


if __name__ == "__main__":
    app()
