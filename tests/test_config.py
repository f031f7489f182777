import pytest
import yaml
from nhsnumber.core.config import DEFAULT_CONFIG, NhsNumberConfig, load_config
from nhsnumber.core.errors import ConfigError

def test_default_config_is_valid():
    DEFAULT_CONFIG.validate()
    assert DEFAULT_CONFIG.default_quantity == 1
    assert DEFAULT_CONFIG.default_valid is True
    assert DEFAULT_CONFIG.output_format == "digits"

@pytest.mark.parametrize("kwargs", [
    {"default_quantity": -1},
    {"output_format": "dotted"},
    {"max_attempts": 0},
])
def test_config_validation(kwargs):
    with pytest.raises(ConfigError):
        NhsNumberConfig(**kwargs).validate()

def test_load_config(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text(yaml.dump({
        "version": 1,
        "nhsnumber": {
            "default_quantity": 5,
            "output_format": "spaced",
            "seed": 42,
        }
    }))

    config = load_config(str(config_file))
    assert config.default_quantity == 5
    assert config.output_format == "spaced"
    assert config.seed == 42
    assert config.max_attempts == DEFAULT_CONFIG.max_attempts

def test_load_config_empty_section(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text("version: 1\n")
    assert load_config(config_file) == NhsNumberConfig()

def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")

def test_load_config_unknown_keys(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text(yaml.dump({"version": 1, "nhsnumber": {"colour": "blue"}}))
    with pytest.raises(ConfigError, match="Unknown config keys: colour"):
        load_config(config_file)

def test_load_config_missing_version(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text(yaml.dump({"nhsnumber": {"seed": 1}}))
    with pytest.raises(ConfigError, match="version"):
        load_config(config_file)

def test_load_config_not_a_mapping(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError):
        load_config(config_file)

def test_load_config_bad_yaml(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text("version: [1\n")
    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(config_file)

def test_load_config_invalid_value(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text(yaml.dump({"version": 1, "nhsnumber": {"output_format": "dotted"}}))
    with pytest.raises(ConfigError, match="output_format"):
        load_config(config_file)
