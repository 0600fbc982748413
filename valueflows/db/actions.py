"""
The fixed Valueflows action vocabulary.

Actions are not stored in a table: rows reference them by identifier (for
example ``EconomicResource.state_id``) and they are resolved from this map.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

INCREMENT = "increment"
DECREMENT = "decrement"
NO_EFFECT = "noEffect"
DECREMENT_INCREMENT = "decrementIncrement"

INPUT = "input"
OUTPUT = "output"
NOT_APPLICABLE = "notApplicable"


@dataclass(frozen=True)
class Action:
    id: str
    label: str
    resource_effect: str
    onhand_effect: str
    input_output: str = NOT_APPLICABLE
    pairs_with: str = NOT_APPLICABLE


def _a(id_, resource_effect, onhand_effect, input_output=NOT_APPLICABLE, pairs_with=NOT_APPLICABLE):
    return Action(id_, id_, resource_effect, onhand_effect, input_output, pairs_with)


ACTIONS: Dict[str, Action] = {
    a.id: a
    for a in (
        _a("produce", INCREMENT, INCREMENT, OUTPUT),
        _a("use", NO_EFFECT, NO_EFFECT, INPUT),
        _a("consume", DECREMENT, DECREMENT, INPUT),
        _a("cite", NO_EFFECT, NO_EFFECT, INPUT),
        _a("work", NO_EFFECT, NO_EFFECT, INPUT),
        _a("deliverService", NO_EFFECT, NO_EFFECT, OUTPUT),
        _a("pickup", NO_EFFECT, NO_EFFECT, INPUT, "dropoff"),
        _a("dropoff", NO_EFFECT, NO_EFFECT, OUTPUT, "pickup"),
        _a("accept", NO_EFFECT, DECREMENT, INPUT, "modify"),
        _a("modify", NO_EFFECT, INCREMENT, OUTPUT, "accept"),
        _a("pass", NO_EFFECT, NO_EFFECT, OUTPUT, "accept"),
        _a("fail", NO_EFFECT, NO_EFFECT, OUTPUT, "accept"),
        _a("transferAllRights", DECREMENT_INCREMENT, NO_EFFECT),
        _a("transferCustody", NO_EFFECT, DECREMENT_INCREMENT),
        _a("transfer", DECREMENT_INCREMENT, DECREMENT_INCREMENT),
        _a("move", DECREMENT_INCREMENT, DECREMENT_INCREMENT),
        _a("raise", INCREMENT, INCREMENT),
        _a("lower", DECREMENT, DECREMENT),
        _a("combine", NO_EFFECT, DECREMENT, INPUT),
        _a("separate", NO_EFFECT, INCREMENT, OUTPUT),
    )
}


def get_action(action_id: Optional[str]) -> Optional[Action]:
    if action_id is None:
        return None
    try:
        return ACTIONS[action_id]
    except KeyError:
        raise ValueError(f"unknown action {action_id!r}")
