"""Output formatters for targets, meal plans and sessions."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from kinetic.meals.models import NutritionTotals
from kinetic.meals.plan import MEALS, WeeklyPlan, compare_to_targets, day_totals, slot_totals
from kinetic.profiles.body_calc import MacroTargets, targets_to_dict
from kinetic.rounding import round_half_up
from kinetic.skills.resolver import estimate_burn
from kinetic.studio.models import BlockMode, SessionDraft
from kinetic.studio.session import SessionTotals, block_met, session_totals


def totals_to_dict(totals: NutritionTotals) -> dict:
    """Convert NutritionTotals to dict for JSON output (rounded to 0.1)."""
    return {
        "calories": round_half_up(totals.calories, 1),
        "protein": round_half_up(totals.protein, 1),
        "carb": round_half_up(totals.carb, 1),
        "fat": round_half_up(totals.fat, 1),
    }


def session_totals_to_dict(totals: SessionTotals) -> dict:
    """Convert SessionTotals to dict for JSON output."""
    return {
        "totalTime": totals.total_time,
        "totalCalories": totals.total_calories,
    }


def day_report(plan: WeeklyPlan, day: str, targets: Optional[MacroTargets] = None) -> dict:
    """Per-meal and whole-day totals for one day, with target progress."""
    totals = day_totals(plan, day)
    progress = compare_to_targets(totals, targets)
    return {
        "day": day,
        "meals": {
            meal: totals_to_dict(slot_totals(plan.ingredients(day, meal)))
            for meal in MEALS
        },
        "totals": totals_to_dict(totals),
        "targets": targets_to_dict(targets) if targets else None,
        "over_target": [name for name, item in progress.items() if item.over_target],
    }


class TableFormatter:
    """Format results as Rich tables for terminal display."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the formatter.

        Args:
            console: Rich console for output. If None, creates a new one.
        """
        self.console = console or Console()

    def format_targets(self, targets: MacroTargets) -> None:
        """Print calculated targets."""
        self.console.print(Panel(targets.summary(), title="Composition & Energy"))

    def format_day(
        self,
        plan: WeeklyPlan,
        day: str,
        targets: Optional[MacroTargets] = None,
    ) -> None:
        """Print every meal slot of a day and the day's totals.

        Totals above target are highlighted in red.
        """
        table = Table(title=f"{day} Meal Plan")
        table.add_column("Meal", style="cyan")
        table.add_column("Food", max_width=40)
        table.add_column("Grams", justify="right")
        table.add_column("Kcal", justify="right")
        table.add_column("Protein", justify="right")
        table.add_column("Carbs", justify="right")
        table.add_column("Fat", justify="right")

        for meal in MEALS:
            ingredients = plan.ingredients(day, meal)
            if not ingredients:
                table.add_row(meal, "[dim]empty[/dim]", "", "", "", "", "")
                continue
            for position, ingredient in enumerate(ingredients):
                table.add_row(
                    meal if position == 0 else "",
                    ingredient.name[:40],
                    f"{ingredient.weight:.0f}",
                    f"{ingredient.calories:.0f}",
                    f"{ingredient.protein:.1f}",
                    f"{ingredient.carb:.1f}",
                    f"{ingredient.fat:.1f}",
                )

        totals = day_totals(plan, day)
        progress = compare_to_targets(totals, targets)

        def cell(name: str, value: float) -> str:
            item = progress[name]
            text = f"{round_half_up(value)}"
            if item.target is not None:
                text += f" / {item.target}"
            if item.over_target:
                return f"[red]{text}[/red]"
            return text

        table.add_row(
            "[bold]TOTAL[/bold]",
            "",
            "",
            cell("calories", totals.calories),
            cell("protein", totals.protein),
            cell("carb", totals.carb),
            cell("fat", totals.fat),
            style="bold",
        )

        self.console.print(table)

    def format_session(self, draft: SessionDraft, body_weight_kg: float) -> None:
        """Print a session's blocks with per-block and total estimates."""
        table = Table(title=draft.name or "Untitled")
        table.add_column("#", justify="right")
        table.add_column("Block", style="cyan")
        table.add_column("Type")
        table.add_column("Plan")
        table.add_column("Min", justify="right")
        table.add_column("Kcal", justify="right", style="green")

        for position, node in enumerate(draft.nodes, start=1):
            plan = f"{node.sets}x{node.reps}" if node.mode == BlockMode.REPS else "timer"
            burn = estimate_burn(block_met(node.kind), body_weight_kg, node.duration)
            table.add_row(
                str(position),
                node.label,
                node.kind.value,
                plan,
                str(node.duration),
                str(burn),
            )

        totals = session_totals(draft.nodes, body_weight_kg)
        table.add_row(
            "",
            "[bold]TOTAL[/bold]",
            "",
            "",
            f"[bold]{totals.total_time}[/bold]",
            f"[bold]{totals.total_calories}[/bold]",
            style="bold",
        )

        self.console.print(table)
