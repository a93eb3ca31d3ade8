"""
Scenario definitions: a scenario plus how many times it is executed in a run.
"""
from __future__ import annotations

from typing import Any, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, ValidationError, field_validator

from loadsim.domain.errors import SchemaError
from loadsim.domain.registry import scenario_from_element
from loadsim.domain.scenarios import Scenario
from loadsim.domain.validation import parse_json


class ScenarioDefinition(BaseModel):
    """
    One entry of a load request.
    """

    nb_of_execution: int = Field(
        1, alias="nbOfExecution", ge=1, description="Times the scenario is repeated."
    )
    scenario: SerializeAsAny[Scenario] = Field(
        ..., description="Scenario variant, chosen by its scenarioType."
    )

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        strict=True,
    )

    @field_validator("scenario", mode="before")
    @classmethod
    def _decode_scenario(cls, value: Any) -> Any:
        if isinstance(value, Scenario):
            return value
        try:
            return scenario_from_element(value)
        except SchemaError as exc:
            raise ValueError(str(exc)) from exc

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


def load_definitions(json_string: str) -> List[ScenarioDefinition]:
    """
    Decode a JSON array of scenario definitions.

    Raises
    ------
    SchemaError
        If the text is not a JSON array of valid definitions.
    """
    element = parse_json(json_string)
    if not isinstance(element, list):
        raise SchemaError("Expected a JSON array of scenario definitions")
    try:
        return [ScenarioDefinition.model_validate(item) for item in element]
    except ValidationError as exc:
        raise SchemaError(f"Invalid scenario definition: {exc}") from exc


def expand_definitions(definitions: Iterable[ScenarioDefinition]) -> List[Scenario]:
    """
    Flatten definitions, repeating each scenario `nb_of_execution` times in order.

    Repeats share the definition's scenario instance; mutating one entry of the
    result mutates every repeat of it.
    """
    result: List[Scenario] = []
    for definition in definitions:
        result.extend([definition.scenario] * definition.nb_of_execution)
    return result


__all__ = ["ScenarioDefinition", "expand_definitions", "load_definitions"]
