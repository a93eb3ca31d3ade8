from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from loadsim.domain.errors import SchemaError
from loadsim.domain.scenarios import (
    RoundRobinMoneyTransfer,
    Scenario,
    SelfTransactionWithPayload,
    SelfTransactionWithRandomPayload,
)

EXPECTED_TYPE = "RoundRobinMoneyTransfer"
EXPECTED_TRANSFERS = 5
EXPECTED_WALLETS = 3


def test_defaults():
    scenario = RoundRobinMoneyTransfer()
    assert scenario.scenario_type == EXPECTED_TYPE
    assert scenario.nb_transfers == 1
    assert scenario.nb_wallets == 1


def test_fluent_setters_return_same_instance():
    scenario = RoundRobinMoneyTransfer()
    returned = scenario.with_nb_transfers(EXPECTED_TRANSFERS).with_nb_wallets(EXPECTED_WALLETS)
    assert returned is scenario
    assert scenario.nb_transfers == EXPECTED_TRANSFERS
    assert scenario.nb_wallets == EXPECTED_WALLETS


def test_fields_are_nullable():
    scenario = RoundRobinMoneyTransfer().with_nb_wallets(None)
    assert scenario.nb_wallets is None
    assert scenario.nb_wallets != 0


def test_scenario_type_cannot_be_inconsistent():
    with pytest.raises(ValidationError):
        RoundRobinMoneyTransfer(scenarioType="SelfTransactionWithPayload")
    scenario = RoundRobinMoneyTransfer()
    with pytest.raises(ValidationError):
        scenario.scenario_type = "Other"
    assert scenario.scenario_type == EXPECTED_TYPE


def test_assignment_is_type_checked():
    scenario = RoundRobinMoneyTransfer()
    with pytest.raises(ValidationError):
        scenario.nb_transfers = "many"


def test_field_sets_include_own_fields():
    assert RoundRobinMoneyTransfer.openapi_fields == frozenset(
        {"scenarioType", "nbTransfers", "nbWallets"}
    )
    assert RoundRobinMoneyTransfer.openapi_required_fields == frozenset({"scenarioType"})
    assert SelfTransactionWithRandomPayload.openapi_fields == frozenset(
        {"scenarioType", "wallet", "nbWallets", "nbTransfers", "payloadSize"}
    )


def test_from_json_scenario(round_robin_payload: dict):
    scenario = RoundRobinMoneyTransfer.from_json(json.dumps(round_robin_payload))
    assert isinstance(scenario, RoundRobinMoneyTransfer)
    assert scenario.nb_transfers == EXPECTED_TRANSFERS
    assert scenario.nb_wallets == EXPECTED_WALLETS
    assert json.loads(scenario.to_json()) == round_robin_payload


def test_round_trip_preserves_equality():
    cases = [
        RoundRobinMoneyTransfer(),
        RoundRobinMoneyTransfer().with_nb_transfers(0).with_nb_wallets(100),
        RoundRobinMoneyTransfer().with_nb_transfers(None),
        SelfTransactionWithPayload().with_payload("0xdeadbeef").with_wallet("source"),
        SelfTransactionWithRandomPayload().with_payload_size(128),
    ]
    for scenario in cases:
        assert type(scenario).from_json(scenario.to_json()) == scenario


def test_to_json_uses_wire_names_and_emits_nulls():
    scenario = RoundRobinMoneyTransfer().with_nb_wallets(None)
    assert scenario.to_json() == (
        '{"scenarioType":"RoundRobinMoneyTransfer","nbTransfers":1,"nbWallets":null}'
    )


def test_explicit_null_optional_field_decodes_to_none():
    scenario = RoundRobinMoneyTransfer.from_json(
        '{"scenarioType": "RoundRobinMoneyTransfer", "nbTransfers": null}'
    )
    assert scenario.nb_transfers is None
    assert scenario.nb_wallets == 1


@pytest.mark.parametrize(
    "payload",
    [
        '{"scenarioType": "RoundRobinMoneyTransfer", "extra": 1}',
        '{"nbTransfers": 5}',
        '{"scenarioType": null}',
        "null",
        "[1, 2]",
        "{not json",
        '{"scenarioType": "RoundRobinMoneyTransfer", "nbTransfers": "5"}',
        '{"scenarioType": "RoundRobinMoneyTransfer", "nbWallets": true}',
        '{"scenarioType": "SelfTransactionWithPayload"}',
    ],
)
def test_from_json_rejects_invalid_payloads(payload: str):
    with pytest.raises(SchemaError):
        RoundRobinMoneyTransfer.from_json(payload)


def test_unknown_field_is_named_in_error():
    with pytest.raises(SchemaError, match="`extra`"):
        RoundRobinMoneyTransfer.from_json('{"scenarioType": "RoundRobinMoneyTransfer", "extra": 1}')


def test_equality_and_hash():
    first = RoundRobinMoneyTransfer().with_nb_transfers(EXPECTED_TRANSFERS)
    second = RoundRobinMoneyTransfer().with_nb_transfers(EXPECTED_TRANSFERS)
    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1

    second.with_nb_wallets(EXPECTED_WALLETS)
    assert first != second


def test_variants_with_same_values_are_not_equal():
    payload = SelfTransactionWithPayload()
    random_payload = SelfTransactionWithRandomPayload()
    assert payload != random_payload
    assert RoundRobinMoneyTransfer() != "RoundRobinMoneyTransfer"


def test_string_rendering_nests_base_record():
    scenario = RoundRobinMoneyTransfer().with_nb_wallets(None)
    assert str(scenario) == (
        "class RoundRobinMoneyTransfer {\n"
        "    class Scenario {\n"
        "        scenarioType: RoundRobinMoneyTransfer\n"
        "    }\n"
        "    nbTransfers: 1\n"
        "    nbWallets: null\n"
        "}"
    )


def test_base_scenario_cannot_be_constructed():
    with pytest.raises(ValidationError):
        Scenario()
    with pytest.raises(SchemaError):
        Scenario.from_json('{"scenarioType": "Scenario"}')
