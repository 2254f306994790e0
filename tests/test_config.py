import json

import pytest

from graphnexus import ConfigurationError, GraphConfig


def test_defaults():
    config = GraphConfig()
    assert config.to_dict() == {
        'encoding': 'utf-8',
        'skip_blank_lines': False,
        'missing_edge_policy': 'skip',
        'log_level': 'WARNING',
    }


def test_invalid_policy():
    with pytest.raises(ConfigurationError):
        GraphConfig(missing_edge_policy="explode")


def test_invalid_log_level():
    with pytest.raises(ConfigurationError):
        GraphConfig(log_level="LOUD")


def test_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"missing_edge_policy": "reject", "log_level": "debug"}))
    config = GraphConfig.from_file(path)
    assert config.missing_edge_policy == "reject"
    assert config.get_setting("log_level") == "debug"
    assert config.get_setting("nope", 3) == 3


def test_from_file_errors(tmp_path):
    with pytest.raises(ConfigurationError):
        GraphConfig.from_file(tmp_path / "missing.json")
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json")
    with pytest.raises(ConfigurationError):
        GraphConfig.from_file(bad_json)
    unknown = tmp_path / "unknown.json"
    unknown.write_text(json.dumps({"colour": "blue"}))
    with pytest.raises(ConfigurationError):
        GraphConfig.from_file(unknown)


def test_update_settings_revalidates():
    config = GraphConfig()
    config.update_settings(log_level="INFO")
    assert config.log_level == "INFO"
    with pytest.raises(ConfigurationError):
        config.update_settings(missing_edge_policy="bogus")
