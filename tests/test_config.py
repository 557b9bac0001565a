"""
TOML configuration loading.
Run with:  python -m pytest tests/ -v
"""

import pytest

from shared.config import CaesarLabConfig, CaesarConfig, GlobalConfig, get_config


def test_defaults():
    config = CaesarLabConfig()
    assert config.caesar == CaesarConfig()
    assert config.caesar.max_message_length == 1000
    assert config.caesar.long_message_ratio == 0.8
    assert config.caesar.preview_length == 50
    assert config.caesar.rank_candidates is False
    assert config.global_settings.log_level == "WARNING"


def test_load_toml_ignores_unknown_keys(tmp_path):
    path = tmp_path / "lab.toml"
    path.write_text(
        "[global]\n"
        'log_level = "DEBUG"\n'
        "colour = true\n"
        "\n"
        "[caesar]\n"
        "max_message_length = 280\n"
        "rank_candidates = true\n"
        "alphabet = 'greek'\n",
        encoding="utf-8",
    )
    config = CaesarLabConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.caesar.max_message_length == 280
    assert config.caesar.rank_candidates is True
    assert config.caesar.preview_length == 50


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CaesarLabConfig.load(tmp_path / "missing.toml")


def test_invalid_toml_raises_value_error(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("[caesar\n", encoding="utf-8")
    with pytest.raises(ValueError):
        CaesarLabConfig.load(path)


def test_to_dict():
    data = CaesarLabConfig(global_settings=GlobalConfig(debug=True)).to_dict()
    assert data["global_settings"]["debug"] is True
    assert data["caesar"]["max_message_length"] == 1000


def test_get_config_caches_until_a_path_is_given(tmp_path):
    path = tmp_path / "lab.toml"
    path.write_text("[caesar]\npreview_length = 20\n", encoding="utf-8")
    loaded = get_config(path)
    assert loaded.caesar.preview_length == 20
    assert get_config() is loaded
