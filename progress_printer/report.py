from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_report_rich(*, summary: dict, results: list):
    # results: DemoResult(name, steps, elapsed)
    console = Console()

    lines = [
        f"Demos: {', '.join(summary['demos'])}",
        f"Steps: {summary['steps']} | Delay/step: {summary['delay_ms']} ms | Throttle: {summary['throttle_ms']} ms",
    ]
    console.print(Panel("\n".join(lines), title="Run summary", expand=False))

    table = Table(title="Progress demos", show_lines=False)
    table.add_column("Demo", justify="left", no_wrap=True)
    table.add_column("Steps", justify="right")
    table.add_column("Elapsed", justify="right")
    table.add_column("Steps/s", justify="right")

    for result in results:
        rate = result.steps / result.elapsed if result.elapsed > 0 else 0.0
        elapsed_text = Text(f"{result.elapsed:.2f}s")
        if result.elapsed > 2.0:
            elapsed_text.stylize("yellow")
        else:
            elapsed_text.stylize("green")

        table.add_row(result.name, str(result.steps), elapsed_text, f"{rate:.1f}")

    console.print(table)
