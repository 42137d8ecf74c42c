"""Main CLI interface using Typer."""

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from .. import __version__
from ..config import (
    ClusterRegistry,
    ComponentVersionRegistry,
    ConfigurationValidator,
    read_config,
)
from ..config.loader import config_file_path, file_metadata
from ..exceptions import (
    InvalidComponentError,
    UpgradeToolError,
    VersionMismatchError,
)
from ..k8s import K8sClient
from ..k8s.client import SYSTEM_NAMESPACE
from ..model.configuration import Configurations
from ..upgrade import ComponentVersionReconciler

# Create CLI app
app = typer.Typer(
    name="k8s-cluster-upgrade-tool",
    help="Validate upgrade configuration and compare EKS component versions",
    add_completion=True,
)

console = Console()


def _fail(message: object) -> NoReturn:
    console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(1)


def _load_config(config_dir: Optional[Path]) -> Configurations:
    try:
        file_name, file_type, _ = file_metadata()
        return read_config(file_name, file_type, config_dir)
    except UpgradeToolError as e:
        _fail(e)


def _require_valid(config: Configurations) -> None:
    """Stop unless every component version and cluster entry is complete."""
    validator = ConfigurationValidator(config)
    if not validator.is_valid():
        for error in validator.errors():
            console.print(f"  - {error}")
        _fail("configuration is not valid")


@app.command()
def validate(
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml"
    ),
):
    """Validate the configuration file."""
    config = _load_config(config_dir)
    _require_valid(config)

    table = Table(title="Component Versions", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan")
    table.add_column("Target Version", style="green")
    for component, target in config.components.as_dict().items():
        table.add_row(component, target)
    console.print(table)

    console.print(
        f"[green]✓[/green] Configuration is valid ({len(config.cluster_list)} clusters)"
    )


@app.command()
def clusters(
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml"
    ),
):
    """List the configured clusters."""
    registry = ClusterRegistry(_load_config(config_dir))

    if not len(registry):
        console.print("[yellow]No clusters configured[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("AWS Account", style="white")
    table.add_column("AWS Region", style="white")
    for cluster in registry:
        table.add_row(cluster.name, cluster.aws_account, cluster.aws_region)
    console.print(table)


@app.command("cluster-info")
def cluster_info(
    name: str = typer.Argument(..., help="Cluster name as written in the config file"),
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml"
    ),
):
    """Show the AWS account and region of a cluster."""
    registry = ClusterRegistry(_load_config(config_dir))
    try:
        account, region = registry.get_aws_account_and_region(name)
    except UpgradeToolError as e:
        _fail(e)

    console.print(f"Cluster: [cyan]{name}[/cyan]")
    console.print(f"AWS account: [cyan]{account}[/cyan]")
    console.print(f"AWS region: [cyan]{region}[/cyan]")


@app.command("check-version")
def check_version(
    component: str = typer.Argument(
        ..., help="One of aws-node, cluster-autoscaler, coredns, kube-proxy"
    ),
    component_version: str = typer.Argument(..., help="Version you intend to apply"),
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml"
    ),
):
    """Check a component version against the config file."""
    config = _load_config(config_dir)
    _require_valid(config)
    registry = ComponentVersionRegistry(config)
    try:
        registry.validate_component_version(component, component_version)
    except VersionMismatchError as e:
        console.print(f"Expected: [green]{e.expected}[/green], passed: [red]{e.actual}[/red]")
        _fail(e)
    except InvalidComponentError as e:
        _fail(e)

    console.print(
        f"[green]✓[/green] {component} version {component_version} matches the config file"
    )


@app.command()
def status(
    name: str = typer.Argument(..., help="Cluster name as written in the config file"),
    context: Optional[str] = typer.Option(
        None, "--context", "-c", help="Kubernetes context to use"
    ),
    namespace: str = typer.Option(
        SYSTEM_NAMESPACE, "--namespace", "-n", help="Namespace of the component workloads"
    ),
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml"
    ),
):
    """Compare running component versions with the config file."""
    config = _load_config(config_dir)
    _require_valid(config)
    if not ClusterRegistry(config).cluster_exists(name):
        _fail(f"cluster {name} is not in the config file")

    try:
        with console.status(f"[bold green]Reading component images from {name}..."):
            client = K8sClient(context=context)
            reconciler = ComponentVersionReconciler(config, client, namespace=namespace)
            statuses = reconciler.reconcile(name)
    except (UpgradeToolError, RuntimeError) as e:
        _fail(e)

    table = Table(title=f"Components in {name}", show_header=True, header_style="bold magenta")
    table.add_column("Component", style="cyan")
    table.add_column("Object", style="white")
    table.add_column("Current", style="white")
    table.add_column("Target", style="white")
    table.add_column("Status", style="white")

    for row in statuses:
        if row.error:
            state = f"[red]{row.error}[/red]"
        elif row.up_to_date:
            state = "[green]up to date[/green]"
        else:
            state = "[yellow]upgrade needed[/yellow]"
        table.add_row(
            row.component.value,
            f"{row.object_type}/{row.object_name}",
            row.current_version or "-",
            row.target_version,
            state,
        )
    console.print(table)

    outdated = [row for row in statuses if not row.up_to_date]
    if outdated:
        console.print(f"[yellow]{len(outdated)} component(s) differ from the config file[/yellow]")
    else:
        console.print("[green]✓[/green] All components match the config file")


@app.command("config-path")
def config_path(
    config_dir: Optional[Path] = typer.Option(
        None, "--config-dir", help="Directory holding config.yaml"
    ),
):
    """Show where the config file is read from."""
    file_name, file_type, _ = file_metadata()
    console.print(str(config_file_path(file_name, file_type, config_dir)))


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]k8s-cluster-upgrade-tool[/bold] version {__version__}")


if __name__ == "__main__":
    app()
