"""
Scenario records for the load simulation.

Every scenario variant shares the `scenarioType` discriminator declared on
`Scenario`. Variants are pydantic models with a closed schema: the allowed and
required JSON keys are computed once per class from its declared fields and
checked by `validate_json_element` before any payload is mapped onto the model.

Usage:
    from loadsim.domain.scenarios import RoundRobinMoneyTransfer

    scenario = RoundRobinMoneyTransfer().with_nb_wallets(10).with_nb_transfers(3)
    payload = scenario.to_json()
    assert RoundRobinMoneyTransfer.from_json(payload) == scenario
"""
from __future__ import annotations

from typing import Any, ClassVar, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from loadsim.domain.errors import SchemaError
from loadsim.domain.validation import parse_json, validate_json_element

INDENT = "    "


def _to_indented_string(value: Any) -> str:
    """Render a value with every line after the first indented by 4 spaces."""
    if value is None:
        return "null"
    return str(value).replace("\n", "\n" + INDENT)


def _wire_names(model: type[BaseModel], required_only: bool = False) -> FrozenSet[str]:
    return frozenset(
        info.alias or name
        for name, info in model.model_fields.items()
        if not required_only or info.is_required()
    )


class Scenario(BaseModel):
    """
    Abstract base record for all scenario variants; only subclasses can be built.

    `scenario_type` is filled with the concrete class name on construction and
    cannot be set to anything else.
    """

    openapi_fields: ClassVar[FrozenSet[str]] = frozenset({"scenarioType"})
    openapi_required_fields: ClassVar[FrozenSet[str]] = frozenset({"scenarioType"})

    scenario_type: str = Field(
        ...,
        alias="scenarioType",
        description="Discriminator naming the concrete scenario variant.",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
        strict=True,
    )

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        cls.openapi_fields = _wire_names(cls)
        cls.openapi_required_fields = _wire_names(cls, required_only=True)

    @model_validator(mode="before")
    @classmethod
    def _default_scenario_type(cls, data: Any) -> Any:
        if cls is Scenario:
            raise ValueError("Scenario is abstract; construct a concrete scenario variant")
        if isinstance(data, dict) and "scenarioType" not in data and "scenario_type" not in data:
            return {**data, "scenarioType": cls.__name__}
        return data

    @field_validator("scenario_type")
    @classmethod
    def _check_scenario_type(cls, value: str) -> str:
        if value != cls.__name__:
            raise ValueError(f"scenarioType must be '{cls.__name__}', got '{value}'")
        return value

    # -- validation / decoding -------------------------------------------------

    @classmethod
    def validate_json_element(cls, element: Any) -> None:
        """
        Check a parsed JSON element against this variant's closed schema.

        Raises
        ------
        SchemaError
            If the element is null, has unknown keys or misses required keys.
        """
        validate_json_element(
            element,
            type_name=cls.__name__,
            fields=cls.openapi_fields,
            required=cls.openapi_required_fields,
        )

    @classmethod
    def from_element(cls, element: Any) -> "Scenario":
        """Validate a parsed JSON element and map it onto this variant."""
        cls.validate_json_element(element)
        try:
            return cls.model_validate(element)
        except ValidationError as exc:
            raise SchemaError(f"Invalid {cls.__name__} payload: {exc}") from exc

    @classmethod
    def from_json(cls, json_string: str) -> "Scenario":
        """
        Create an instance of this variant from a JSON string.

        Raises
        ------
        SchemaError
            If the string is not valid JSON or does not match the schema.
        """
        return cls.from_element(parse_json(json_string))

    # -- encoding --------------------------------------------------------------

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Serialize to a JSON object using wire names; absent values are emitted as null."""
        return self.model_dump_json(by_alias=True)

    # -- value semantics -------------------------------------------------------

    def _identity(self) -> Tuple[Any, ...]:
        return (type(self),) + tuple(getattr(self, name) for name in type(self).model_fields)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Scenario):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def _base_str(self) -> str:
        return (
            "class Scenario {\n"
            f"{INDENT}scenarioType: {_to_indented_string(self.scenario_type)}\n"
            "}"
        )

    def __str__(self) -> str:
        lines = [f"class {type(self).__name__} {{", INDENT + _to_indented_string(self._base_str())]
        for name, info in type(self).model_fields.items():
            if name in Scenario.model_fields:
                continue
            lines.append(f"{INDENT}{info.alias or name}: {_to_indented_string(getattr(self, name))}")
        lines.append("}")
        return "\n".join(lines)


class RoundRobinMoneyTransfer(Scenario):
    """
    Create `nb_wallets` new wallets and make each of them send `nb_transfers`
    transfers to each other in a round robin fashion.
    """

    nb_transfers: Optional[int] = Field(
        1, alias="nbTransfers", description="Transfers each wallet sends to each peer."
    )
    nb_wallets: Optional[int] = Field(1, alias="nbWallets", description="Wallets to create.")

    def with_nb_transfers(self, nb_transfers: Optional[int]) -> "RoundRobinMoneyTransfer":
        self.nb_transfers = nb_transfers
        return self

    def with_nb_wallets(self, nb_wallets: Optional[int]) -> "RoundRobinMoneyTransfer":
        self.nb_wallets = nb_wallets
        return self


class SelfTransactionWithPayload(Scenario):
    """Each wallet sends `nb_transfers` transactions to itself carrying a fixed payload."""

    wallet: Optional[str] = Field("new", description="'new' to create wallets, else the source wallet.")
    nb_wallets: Optional[int] = Field(1, alias="nbWallets")
    nb_transfers: Optional[int] = Field(1, alias="nbTransfers")
    payload: Optional[str] = Field(None, description="Hex-encoded call data.")

    def with_wallet(self, wallet: Optional[str]) -> "SelfTransactionWithPayload":
        self.wallet = wallet
        return self

    def with_nb_wallets(self, nb_wallets: Optional[int]) -> "SelfTransactionWithPayload":
        self.nb_wallets = nb_wallets
        return self

    def with_nb_transfers(self, nb_transfers: Optional[int]) -> "SelfTransactionWithPayload":
        self.nb_transfers = nb_transfers
        return self

    def with_payload(self, payload: Optional[str]) -> "SelfTransactionWithPayload":
        self.payload = payload
        return self


class SelfTransactionWithRandomPayload(Scenario):
    """Like `SelfTransactionWithPayload`, with a random payload of `payload_size` bytes."""

    wallet: Optional[str] = Field("new")
    nb_wallets: Optional[int] = Field(1, alias="nbWallets")
    nb_transfers: Optional[int] = Field(1, alias="nbTransfers")
    payload_size: Optional[int] = Field(None, alias="payloadSize")

    def with_wallet(self, wallet: Optional[str]) -> "SelfTransactionWithRandomPayload":
        self.wallet = wallet
        return self

    def with_nb_wallets(self, nb_wallets: Optional[int]) -> "SelfTransactionWithRandomPayload":
        self.nb_wallets = nb_wallets
        return self

    def with_nb_transfers(self, nb_transfers: Optional[int]) -> "SelfTransactionWithRandomPayload":
        self.nb_transfers = nb_transfers
        return self

    def with_payload_size(self, payload_size: Optional[int]) -> "SelfTransactionWithRandomPayload":
        self.payload_size = payload_size
        return self


__all__ = [
    "Scenario",
    "RoundRobinMoneyTransfer",
    "SelfTransactionWithPayload",
    "SelfTransactionWithRandomPayload",
]
