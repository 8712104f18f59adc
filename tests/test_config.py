import pytest

from deckofcards.config import TableConfig, parse_pick_policy
from deckofcards.exceptions import ConfigError
from deckofcards.table.constants import PickPolicy


def test_defaults():
    config = TableConfig()
    assert config.seed is None
    assert config.pick_policy is PickPolicy.SWAP
    assert config.deal_sizes == (5, 7)


def test_from_dict():
    config = TableConfig.from_dict({"seed": 3, "pick_policy": "PICK", "deal_sizes": [4]})
    assert config.seed == 3
    assert config.pick_policy is PickPolicy.PICK
    assert config.deal_sizes == (4,)


def test_from_dict_empty():
    assert TableConfig.from_dict(None) == TableConfig()


def test_from_dict_unknown_keys():
    with pytest.raises(ConfigError, match="colour"):
        TableConfig.from_dict({"colour": "red"})


@pytest.mark.parametrize(
    "config",
    [
        {"seed": "abc"},
        {"seed": 1.5},
        {"pick_policy": "grab"},
        {"deal_sizes": []},
        {"deal_sizes": [0]},
        {"deal_sizes": [53]},
        {"deal_sizes": ["5"]},
        {"deal_sizes": 5},
    ],
)
def test_invalid_values(config):
    with pytest.raises(ConfigError):
        TableConfig.from_dict(config)


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        TableConfig(seed="x")


def test_from_env():
    config = TableConfig.from_env({"DECK_SEED": "42", "DECK_PICK_POLICY": "pick"})
    assert config.seed == 42
    assert config.pick_policy is PickPolicy.PICK


def test_from_env_empty():
    assert TableConfig.from_env({}) == TableConfig()


def test_from_env_bad_seed():
    with pytest.raises(ConfigError, match="DECK_SEED"):
        TableConfig.from_env({"DECK_SEED": "forty-two"})


def test_make_rng_is_seeded():
    config = TableConfig(seed=9)
    assert config.make_rng().random() == config.make_rng().random()


def test_parse_pick_policy():
    assert parse_pick_policy("swap") is PickPolicy.SWAP
    assert parse_pick_policy(PickPolicy.PICK) is PickPolicy.PICK
    with pytest.raises(ConfigError):
        parse_pick_policy(None)
