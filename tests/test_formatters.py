"""Tests for output formatters."""

from __future__ import annotations

import io

import pytest
from rich.console import Console

from kinetic.export.formatters import (
    TableFormatter,
    day_report,
    session_totals_to_dict,
    totals_to_dict,
)
from kinetic.meals.composer import compose_ingredient
from kinetic.meals.models import CookingMethod, NutritionTotals
from kinetic.meals.plan import add_ingredient, empty_plan
from kinetic.profiles.body_calc import MacroTargets
from kinetic.studio.models import SessionDraft
from kinetic.studio.session import SessionTotals


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def formatter(output):
    return TableFormatter(Console(file=output, width=120))


@pytest.fixture
def targets():
    return MacroTargets(calories=500, protein=150, fat=78, carb=175, lbm=60.0, body_fat=15.0)


@pytest.fixture
def plan(chicken, rice):
    plan = add_ingredient(empty_plan(), "Monday", "Lunch", compose_ingredient(chicken, 200, CookingMethod.DEEP_FRIED))
    return add_ingredient(plan, "Monday", "Dinner", compose_ingredient(rice, 150))


class TestDicts:
    """Tests for dict output."""

    def test_totals_rounded(self):
        totals = NutritionTotals(calories=123.456, protein=10.04, carb=0.0, fat=7.25)
        assert totals_to_dict(totals) == {
            "calories": 123.5,
            "protein": 10.0,
            "carb": 0.0,
            "fat": 7.3,
        }

    def test_session_totals(self):
        assert session_totals_to_dict(SessionTotals(40, 224)) == {
            "totalTime": 40,
            "totalCalories": 224,
        }

    def test_day_report(self, plan, targets):
        report = day_report(plan, "Monday", targets)
        assert report["day"] == "Monday"
        assert report["meals"]["Breakfast"]["calories"] == 0
        assert report["targets"]["calories"] == 500
        assert "calories" in report["over_target"]

    def test_day_report_without_targets(self, plan):
        report = day_report(plan, "Monday")
        assert report["targets"] is None
        assert report["over_target"] == []


class TestTableFormatter:
    """Tests for Rich table output."""

    def test_format_targets(self, formatter, output, male_profile):
        from kinetic.profiles.body_calc import calculate_targets

        formatter.format_targets(calculate_targets(male_profile))
        text = output.getvalue()
        assert "Composition & Energy" in text
        assert "2520 kcal/day" in text

    def test_format_day(self, formatter, output, plan, targets):
        formatter.format_day(plan, "Monday", targets)
        text = output.getvalue()
        assert "Monday Meal Plan" in text
        assert "Deep Fried" in text
        assert "empty" in text
        assert "TOTAL" in text

    def test_format_session(self, formatter, output, full_session):
        formatter.format_session(SessionDraft(name="Morning Flow", nodes=full_session), 80)
        text = output.getvalue()
        assert "Morning Flow" in text
        assert "Strength Set" in text
        assert "224" in text
        assert "TOTAL" in text
