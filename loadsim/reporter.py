"""
Console rendering of scenario lists.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from loadsim.domain.scenarios import Scenario

_COMMON_FIELDS = ("scenarioType", "nbWallets", "nbTransfers")


def _cell(value: Any) -> str:
    return "-" if value is None else str(value)


def scenario_rows(scenarios: Sequence[Scenario]) -> List[Dict[str, str]]:
    """
    Flatten scenarios into table rows.

    Fields shared by most variants get their own column; the rest are joined
    into a `details` cell as `name=value` pairs.
    """
    rows: List[Dict[str, str]] = []
    for index, scenario in enumerate(scenarios, start=1):
        data = scenario.to_dict()
        details = ", ".join(
            f"{key}={_cell(value)}" for key, value in data.items() if key not in _COMMON_FIELDS
        )
        rows.append(
            {
                "index": str(index),
                "type": data["scenarioType"],
                "wallets": _cell(data.get("nbWallets")),
                "transfers": _cell(data.get("nbTransfers")),
                "details": details,
            }
        )
    return rows


def print_scenarios(scenarios: Sequence[Scenario], console: Optional[Console] = None) -> None:
    """
    Render scenarios as a rich table in execution order.
    """
    console = console or Console()

    if not scenarios:
        console.print("[yellow]No scenarios to display.[/yellow]")
        return

    table = Table(title="Scenario Plan", box=box.ROUNDED, caption="In execution order")
    table.add_column("#", justify="right", style="blue")
    table.add_column("Scenario", style="cyan", no_wrap=True)
    table.add_column("Wallets", justify="right", style="magenta")
    table.add_column("Transfers", justify="right", style="green")
    table.add_column("Details", style="yellow")

    for row in scenario_rows(scenarios):
        table.add_row(row["index"], row["type"], row["wallets"], row["transfers"], row["details"])

    console.print(table)


__all__ = ["print_scenarios", "scenario_rows"]
