import pytest

from valueflows.db import actions


def test_action_lookup():
    produce = actions.get_action("produce")
    assert produce.resource_effect == actions.INCREMENT
    assert produce.input_output == actions.OUTPUT
    assert actions.get_action("pass").pairs_with == "accept"
    assert actions.get_action(None) is None


def test_unknown_action_is_rejected():
    with pytest.raises(ValueError):
        actions.get_action("teleport")


def test_pairs_are_symmetric_for_transport():
    assert actions.ACTIONS["pickup"].pairs_with == "dropoff"
    assert actions.ACTIONS["dropoff"].pairs_with == "pickup"
