#!/usr/bin/env python3
"""
Bootcamp Tracker - demo CLI

Builds a catalog, enrolls João and Maria, progresses João and shows what
moved from enrolled to completed.
"""

from datetime import date
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

import config
from facade import BootcampFacade
from models import Content, Course, Dev, JavaScriptXpStrategy, JavaXpStrategy, Mentorship

console = Console()


def sample_catalog() -> list[Content]:
    """The stock catalog used when no catalog file is present."""
    return [
        Course(
            title="Curso Java",
            description="Descrição curso Java",
            workload_hours=8,
            strategy=JavaXpStrategy(),
        ),
        Course(
            title="Curso JavaScript",
            description="Descrição curso JavaScript",
            workload_hours=4,
            strategy=JavaScriptXpStrategy(),
        ),
        Mentorship(
            title="Mentoria de Java",
            description="Descrição mentoria Java",
            date=date.today(),
        ),
    ]


def show_dev(dev: Dev, label: str) -> None:
    """Print a dev's content sets as a table."""
    table = Table(title=f"{dev.name} - {label}", box=box.ROUNDED)
    table.add_column("Content", style="cyan")
    table.add_column("Status")
    table.add_column("XP", justify="right", style="green")

    for content in sorted(dev.enrolled_contents, key=lambda c: c.title):
        table.add_row(content.title, "enrolled", f"{content.compute_xp():.1f}")
    for content in sorted(dev.completed_contents, key=lambda c: c.title):
        table.add_row(content.title, "[green]completed[/green]", f"{content.compute_xp():.1f}")

    console.print(table)


def run_demo(catalog_path: Path = None, steps: int = 2) -> BootcampFacade:
    """Run the enrollment/progress scenario and return the facade used."""
    facade = BootcampFacade()

    contents = config.load_catalog(catalog_path) or sample_catalog()
    for content in contents:
        if isinstance(content, Course):
            facade.add_course(content)
        else:
            facade.add_mentorship(content)

    joao = Dev(name="João")
    facade.enroll_dev(joao)

    maria = Dev(name="Maria")
    facade.enroll_dev(maria)

    bootcamp = facade.bootcamp
    console.print(Panel.fit(
        f"[bold]{bootcamp.name}[/bold]\n[dim]{bootcamp.description}[/dim]",
        border_style="cyan",
    ))

    show_dev(joao, "before")
    for _ in range(steps):
        facade.progress_dev(joao)
    show_dev(joao, "after")

    for dev in (joao, maria):
        console.print(f"[bold]{dev.name}[/bold] total XP: [green]{facade.total_xp_of(dev):.1f}[/green]")

    return facade


def cli():
    """Main CLI entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Bootcamp enrollment and progress demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bootcamp-demo                         # Stock catalog, two progress steps
  bootcamp-demo --catalog catalog.yaml  # Load contents from YAML
  bootcamp-demo --steps 4               # Progress João four times
        """
    )
    parser.add_argument("--catalog", "-c", type=Path, help="YAML catalog file")
    parser.add_argument("--steps", "-s", type=int, default=2, help="Progress calls for João")

    args = parser.parse_args()
    run_demo(args.catalog, args.steps)


if __name__ == "__main__":
    cli()
