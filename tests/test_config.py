import json

import pytest

from lottogen.config import GeneratorConfig, load_config, save_config
from lottogen.errors import ConfigError


def test_defaults():
    cfg = GeneratorConfig()
    assert cfg.history_file == "recent_lotto_numbers.txt"
    assert cfg.output_file == "generated_lotto_numbers.txt"
    assert cfg.games == 5
    assert cfg.bar_width == 50
    assert cfg.seed is None


def test_load_and_save(tmp_path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"games": 3, "seed": 11}), encoding="utf-8")
    cfg = load_config(p)
    assert cfg.games == 3 and cfg.seed == 11

    out = tmp_path / "saved.json"
    save_config(cfg, out)
    assert load_config(out) == cfg


def test_overrides_skip_none():
    cfg = GeneratorConfig().with_overrides(games=None, output_file="x.txt")
    assert cfg.games == 5
    assert cfg.output_file == "x.txt"


@pytest.mark.parametrize("content", [
    '{"gamez": 3}',
    "not json",
    "[1, 2]",
    '{"games": 0}',
    '{"games": "abc"}',
    '{"games": "3"}',
    '{"games": 2.5}',
    '{"games": true}',
    '{"bar_width": "wide"}',
    '{"seed": "7"}',
    '{"seed": -1}',
    '{"history_file": 5}',
])
def test_bad_configs(tmp_path, content):
    p = tmp_path / "cfg.json"
    p.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(p)


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.json")


def test_negative_seed_override_rejected():
    with pytest.raises(ConfigError, match="seed"):
        GeneratorConfig().with_overrides(seed=-1)
