"""Tests for the macro estimator."""

import asyncio

import pytest

from macro_tracker.domain.errors import EstimationError
from macro_tracker.domain.macros import MacroSet
from macro_tracker.services.estimator import MacroEstimator, build_prompt
from tests.conftest import FakeEstimationClient


def test_estimate_subtracts_fiber_from_carbs() -> None:
    client = FakeEstimationClient()
    estimator = MacroEstimator(client=client, model="gpt-4-0613")

    result = asyncio.run(estimator.estimate("banana", 1, "unit(s)"))

    assert result == MacroSet(carbs=24, fats=0.4, proteins=1.3, calories=105)
    assert client.calls[0][0]["role"] == "system"
    assert client.calls[0][1]["content"] == (
        "Estimate the fat, carbohydrates, fiber, proteins, and calories for "
        "1 unit(s) of banana."
    )


@pytest.mark.parametrize(("item", "quantity"), [("", 3), ("banana", None)])
def test_estimate_zero_fills_incomplete_input(item: str, quantity) -> None:
    client = FakeEstimationClient()
    estimator = MacroEstimator(client=client, model="gpt-4-0613")

    result = asyncio.run(estimator.estimate(item, quantity, "g"))

    assert result == MacroSet.zero()
    assert client.calls == []


def test_estimate_returns_none_on_client_error() -> None:
    client = FakeEstimationClient(error=EstimationError("timeout"))
    estimator = MacroEstimator(client=client, model="gpt-4-0613")

    assert asyncio.run(estimator.estimate("banana", 1)) is None


def test_estimate_returns_none_on_missing_field() -> None:
    client = FakeEstimationClient(payload={"fats": 1, "carbohydrates": 2})
    estimator = MacroEstimator(client=client, model="gpt-4-0613")

    assert asyncio.run(estimator.estimate("banana", 1)) is None


def test_build_prompt_includes_brand_and_default_units() -> None:
    prompt = build_prompt("yogurt", 1.5, None, "Fage")

    assert prompt == (
        "Estimate the fat, carbohydrates, fiber, proteins, and calories for "
        "1.5 unit(s) of yogurt (brand information: Fage)."
    )


@pytest.mark.parametrize(
    "overrides",
    [
        {"carbohydrates": float("nan")},
        {"calories": float("inf")},
        {"carbohydrates": "27"},
    ],
)
def test_estimate_rejects_non_finite_and_string_values(overrides) -> None:
    payload = {
        "carbohydrates": 27,
        "fiber": 3,
        "fats": 0.4,
        "proteins": 1.3,
        "calories": 105,
        **overrides,
    }
    estimator = MacroEstimator(
        client=FakeEstimationClient(payload=payload), model="gpt-4-0613"
    )

    assert asyncio.run(estimator.estimate("banana", 1)) is None
