"""
loadsim - scenario records for load simulation.

Scenarios describe one configurable unit of load (for example a round robin
money transfer between freshly created wallets). This package provides:

- Strictly-typed scenario records with a closed JSON schema
- Polymorphic decoding keyed by the `scenarioType` discriminator
- Scenario definitions expanded into an ordered execution list

Executing the load itself is left to the surrounding harness.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from loadsim.config import Settings, get_settings
from loadsim.domain.definitions import ScenarioDefinition, expand_definitions, load_definitions
from loadsim.domain.errors import SchemaError
from loadsim.domain.registry import (
    available_scenario_types,
    scenario_from_element,
    scenario_from_json,
)
from loadsim.domain.scenarios import (
    RoundRobinMoneyTransfer,
    Scenario,
    SelfTransactionWithPayload,
    SelfTransactionWithRandomPayload,
)
from loadsim.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Scenarios
    "Scenario",
    "RoundRobinMoneyTransfer",
    "SelfTransactionWithPayload",
    "SelfTransactionWithRandomPayload",
    "SchemaError",
    # Decoding
    "available_scenario_types",
    "scenario_from_element",
    "scenario_from_json",
    "ScenarioDefinition",
    "expand_definitions",
    "load_definitions",
    # Logging
    "configure_logging",
    "get_logger",
]
