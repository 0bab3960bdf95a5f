import dataclasses

import pytest

from hashdd.config import ConfigDeviceDetection


def test_defaults():
    config = ConfigDeviceDetection()
    assert config.update_matched_user_agent is True
    assert config.max_matched_user_agent_length == 500
    assert config.allow_unmatched is False


def test_custom_values_kept():
    config = ConfigDeviceDetection(
        update_matched_user_agent=False,
        max_matched_user_agent_length=42,
        allow_unmatched=True,
    )
    assert (config.update_matched_user_agent,
            config.max_matched_user_agent_length,
            config.allow_unmatched) == (False, 42, True)


def test_replace_round_trip():
    config = ConfigDeviceDetection()
    changed = dataclasses.replace(config, allow_unmatched=True)
    assert changed.allow_unmatched is True
    assert dataclasses.replace(changed, allow_unmatched=False) == config


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        ConfigDeviceDetection(max_matched_user_agent_length=-1)


@pytest.mark.parametrize("bad", ["500", 2.5, True])
def test_non_integer_length_rejected(bad):
    with pytest.raises(TypeError):
        ConfigDeviceDetection(max_matched_user_agent_length=bad)