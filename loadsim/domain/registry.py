"""
Polymorphic decoding of scenarios keyed by their `scenarioType` discriminator.

Usage:
    from loadsim.domain.registry import scenario_from_json

    scenario = scenario_from_json('{"scenarioType": "RoundRobinMoneyTransfer", "nbWallets": 3}')
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, List, Mapping, Type

from loadsim.domain.errors import SchemaError
from loadsim.domain.scenarios import (
    RoundRobinMoneyTransfer,
    Scenario,
    SelfTransactionWithPayload,
    SelfTransactionWithRandomPayload,
)
from loadsim.domain.validation import parse_json
from loadsim.utils.logging import get_logger

log = get_logger(__name__)

DISCRIMINATOR = "scenarioType"

SCENARIO_TYPES: Mapping[str, Type[Scenario]] = MappingProxyType(
    {
        cls.__name__: cls
        for cls in (
            RoundRobinMoneyTransfer,
            SelfTransactionWithPayload,
            SelfTransactionWithRandomPayload,
        )
    }
)


def available_scenario_types() -> List[str]:
    """List registered scenario type names."""
    return sorted(SCENARIO_TYPES)


def resolve_scenario_type(name: str) -> Type[Scenario]:
    if name not in SCENARIO_TYPES:
        raise SchemaError(
            f"Unknown scenarioType '{name}'. Available: {', '.join(available_scenario_types())}"
        )
    return SCENARIO_TYPES[name]


def scenario_from_element(element: Any) -> Scenario:
    """
    Decode a parsed JSON element into the scenario variant named by its discriminator.

    Raises
    ------
    SchemaError
        If the element is not an object, has no string `scenarioType`, names an
        unknown variant, or fails the variant's own validation.
    """
    if not isinstance(element, dict):
        raise SchemaError(f"Expected a JSON object with a `{DISCRIMINATOR}` field, got: {element!r}")
    tag = element.get(DISCRIMINATOR)
    if not isinstance(tag, str):
        raise SchemaError(f"The required field `{DISCRIMINATOR}` is missing or not a string")

    try:
        scenario = resolve_scenario_type(tag).from_element(element)
    except SchemaError as exc:
        log.warning("Scenario rejected", extra={"scenario_type": tag, "error": str(exc)})
        raise
    log.debug("Scenario decoded", extra={"scenario_type": tag})
    return scenario


def scenario_from_json(json_string: str) -> Scenario:
    """Parse JSON text and decode it through `scenario_from_element`."""
    return scenario_from_element(parse_json(json_string))


__all__ = [
    "DISCRIMINATOR",
    "SCENARIO_TYPES",
    "available_scenario_types",
    "resolve_scenario_type",
    "scenario_from_element",
    "scenario_from_json",
]
