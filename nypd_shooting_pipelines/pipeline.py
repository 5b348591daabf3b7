# End-to-end shooting analysis with Rich console output

import pandas as pd
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

from nypd_shooting_pipelines.ingestion.shooting_ingest import load_shootings
from nypd_shooting_pipelines.transform.transform_master import run_transforms
from nypd_shooting_pipelines.models.modeling_master import run_models
from nypd_shooting_pipelines.reporting.export import save_results
from nypd_shooting_pipelines.reporting.figures import render_figures
from nypd_shooting_pipelines.utils.logging import show_pipeline_table, clear_pipeline_log

from config import PROCESSED_DIR, FIGURES_DIR

console = Console()


def create_header():
    header = """
    ╔═══════════════════════════════════════════════════════════════╗
    ║           NYPD SHOOTING INCIDENT ANALYSIS                     ║
    ║     Load → Clean → Derive → Aggregate → Model → Report        ║
    ╚═══════════════════════════════════════════════════════════════╝
    """
    return Panel(header, style="bold cyan", border_style="bright_cyan", expand=False)


def create_step_panel(step_num, total_steps, title, status="running"):
    if status == "running":
        emoji, style = "⏳", "bold yellow"
    elif status == "complete":
        emoji, style = "✅", "bold green"
    else:
        emoji, style = "❌", "bold red"
    return Panel(f"{emoji} [bold]{title}[/bold]", title=f"[{style}]Step {step_num}/{total_steps}[/{style}]", border_style=style, expand=False)


def create_results_table(results):
    tidy = results["tidy"]
    linear = results["models"]["linear"]
    table = Table(title="📊 Analysis Results", box=box.ROUNDED, show_header=True, header_style="bold magenta", border_style="bright_magenta")
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    table.add_row("Incidents", f"{len(tidy):,}")
    table.add_row("Murders", f"{int(tidy['murder'].sum()):,}")
    if not tidy.empty:
        table.add_row("Date Range", f"{tidy['date'].min():%Y-%m-%d} → {tidy['date'].max():%Y-%m-%d}")
    for key, buckets in results["buckets"].items():
        table.add_row(f"Buckets by {key}", str(len(buckets)))
    table.add_row("Linear fit", f"murders = {linear.intercept:.3f} + {linear.slope:.4f} × shootings")
    table.add_row("Linear R²", f"{linear.r_squared:.3f}")
    table.add_row("Loess R²", f"{results['models']['loess'].r_squared:.3f}")
    return table


def run_analysis(raw: pd.DataFrame, date_errors: str = "raise", show: bool = True) -> dict:
    """
    Everything after loading: transforms, validation, aggregation and both fits.

    Returns the run_transforms output plus 'models' (see run_models).
    """
    results = run_transforms(raw, date_errors=date_errors, show_nulls=show)
    results["models"] = run_models(results["buckets"]["hour"], show=show)
    return results


def main():
    console.print()
    console.print(create_header())
    console.print()
    clear_pipeline_log()
    total_steps = 4
    try:
        console.print(create_step_panel(1, total_steps, "Loading", "running"))
        with console.status("[bold yellow]Downloading incident data...", spinner="dots"):
            raw = load_shootings()
        console.print(create_step_panel(1, total_steps, "Loading Complete", "complete"))
        console.print()

        console.print(create_step_panel(2, total_steps, "Transform & Model", "running"))
        results = run_analysis(raw)
        console.print(create_step_panel(2, total_steps, "Transform & Model Complete", "complete"))
        console.print()

        console.print(create_step_panel(3, total_steps, "Saving Tables", "running"))
        save_results(results, PROCESSED_DIR)
        console.print(create_step_panel(3, total_steps, "Save Complete", "complete"))
        console.print()

        console.print(create_step_panel(4, total_steps, "Rendering Figures", "running"))
        with console.status("[bold yellow]Plotting...", spinner="dots"):
            render_figures(results["buckets"], results["models"]["predictions"], results["yearly"], FIGURES_DIR)
        console.print(create_step_panel(4, total_steps, "Figures Complete", "complete"))
        console.print()

        console.print(Panel("[bold green] ANALYSIS COMPLETED SUCCESSFULLY [/bold green]", border_style="bright_green", expand=False))
        console.print()
        console.print(create_results_table(results))
        console.print()
        show_pipeline_table()
        return results
    except Exception as e:
        console.print()
        console.print(Panel(f"[bold red] ANALYSIS FAILED [/bold red]\n\n[red]Error:[/red] {str(e)}\n\n[dim]Check logs above for details.[/dim]", border_style="bright_red", title="[bold red]Error[/bold red]", expand=False))
        raise


if __name__ == "__main__":
    main()
