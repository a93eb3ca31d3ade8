"""
Domain package for loadsim.

Exports the scenario records, their error type and the discriminator-keyed
decoding helpers. Keep this package focused on data definitions and validation.
"""

from loadsim.domain.definitions import ScenarioDefinition, expand_definitions, load_definitions
from loadsim.domain.errors import SchemaError
from loadsim.domain.registry import (
    SCENARIO_TYPES,
    available_scenario_types,
    resolve_scenario_type,
    scenario_from_element,
    scenario_from_json,
)
from loadsim.domain.scenarios import (
    RoundRobinMoneyTransfer,
    Scenario,
    SelfTransactionWithPayload,
    SelfTransactionWithRandomPayload,
)

__all__ = [
    "SchemaError",
    "Scenario",
    "RoundRobinMoneyTransfer",
    "SelfTransactionWithPayload",
    "SelfTransactionWithRandomPayload",
    "SCENARIO_TYPES",
    "available_scenario_types",
    "resolve_scenario_type",
    "scenario_from_element",
    "scenario_from_json",
    "ScenarioDefinition",
    "expand_definitions",
    "load_definitions",
]
