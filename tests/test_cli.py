import json

import yaml
from click.testing import CliRunner
from nhsnumber import __version__
from nhsnumber.cli import cli
from nhsnumber.core.registry import REGIONS, REGION_SCOTLAND
from nhsnumber.validation.normalizer import standardise_format
from nhsnumber.validation.validator import is_valid

def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"nhsnumber {__version__}"

def test_validate():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", "9876543210"])
    assert result.exit_code == 0
    assert result.output.strip() == "True"

    result = runner.invoke(cli, ["validate", "1234567890"])
    assert result.exit_code == 0
    assert result.output.strip() == "False"

def test_validate_with_region():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", "4000000632", "--region", "wales"])
    assert result.output.strip() == "True"

    result = runner.invoke(cli, ["validate", "9876543210", "--region", "wales"])
    assert result.output.strip() == "False"

def test_unknown_region_is_usage_error():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", "9876543210", "--region", "atlantis"])
    assert result.exit_code == 2
    assert "Unknown region tag 'atlantis'" in result.output

def test_generate_default():
    runner = CliRunner()
    result = runner.invoke(cli, ["generate"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "1"
    assert len(lines) == 2
    assert is_valid(lines[1])

def test_generate_quantity_region_and_validity():
    runner = CliRunner()
    result = runner.invoke(cli, [
        "generate", "--quantity", "5", "--valid", "false", "--region", "scotland",
    ])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "5"
    numbers = lines[1:]
    assert len(numbers) == 5
    assert all(REGION_SCOTLAND.contains_number(n) for n in numbers)
    assert not any(is_valid(n) for n in numbers)

def test_generate_formatted_and_seeded():
    runner = CliRunner()
    args = ["generate", "--quantity", "3", "--format", "hyphenated", "--seed", "7"]
    first = runner.invoke(cli, args)
    second = runner.invoke(cli, args)
    assert first.exit_code == 0
    assert first.output == second.output
    for line in first.output.splitlines()[1:]:
        assert line.count("-") == 2
        assert is_valid(line)

def test_generate_negative_quantity_rejected():
    runner = CliRunner()
    result = runner.invoke(cli, ["generate", "--quantity", "-1"])
    assert result.exit_code == 2

def test_standardise():
    runner = CliRunner()
    result = runner.invoke(cli, ["standardise", " 012-345-6789 "])
    assert result.exit_code == 0
    assert result.output == "0123456789\n"

    result = runner.invoke(cli, ["standardise", "012 345-6789"])
    assert result.output == "\n"

def test_describe_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["describe", "9876543210", "--output", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["valid"] is True
    assert data["identifier_digits"] == "987654321"
    assert data["region_comment"] == "Not to be issued (Synthetic/test patients PDS)"

def test_describe_pretty():
    runner = CliRunner()
    result = runner.invoke(cli, ["describe", "1234567890"])
    assert result.exit_code == 0
    assert "INVALID" in result.output
    assert "Scotland CHI numbers" in result.output

def test_regions_listing():
    runner = CliRunner()
    result = runner.invoke(cli, ["regions"])
    assert result.exit_code == 0
    assert "ENGLAND_WALES_IOM" in result.output
    assert "isle-of-man" in result.output
    assert "4000000000 - 4999999999" in result.output

def test_regions_listing_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["regions", "--output", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert list(data) == list(REGIONS)
    assert data["ENGLAND_WALES_IOM"]["tags"][0] == "england-wales"
    assert [r["start"] for r in data["ENGLAND_WALES_IOM"]["ranges"]] == [4000000000, 6000000000]
    assert data["UNALLOCATED"]["label"] == "Unallocated - should not be a valid Number"

def test_config_file_drives_generation(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text(yaml.dump({
        "version": 1,
        "nhsnumber": {"default_quantity": 4, "output_format": "spaced", "seed": 3},
    }))
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(config_file), "generate"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "4"
    for line in lines[1:]:
        assert line.count(" ") == 2
        assert is_valid(standardise_format(line))

def test_bad_config_file_exits(tmp_path):
    config_file = tmp_path / "nhsnumber.yaml"
    config_file.write_text(yaml.dump({"version": 1, "nhsnumber": {"colour": "blue"}}))
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(config_file), "generate"])
    assert result.exit_code == 1
    assert "Could not load config" in result.output
