"""Tests for the command-line interface."""

import json
from pathlib import Path
from click.testing import CliRunner
from record_mapper.cli import main


class TestCLI:
    """Tests for the record-mapper command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_transform_writes_output(self, temp_dir, write_json, person_batch, profile_mapping):
        """Test a successful run writes the output file and confirms it."""
        input_file = write_json("input.json", person_batch)
        mapping_file = write_json("mapping.json", profile_mapping)
        output_file = temp_dir / "result.json"

        result = self.runner.invoke(main, [str(input_file), str(mapping_file), str(output_file)])

        assert result.exit_code == 0
        assert f"Transformation completed → {output_file}" in result.output
        written = json.loads(output_file.read_text(encoding="utf-8"))
        assert written[1] == {"id": "2", "personalInformation": {"forename": "B", "surname": "Y"}}

    def test_default_output_file(self, write_json, profile_mapping):
        """Test that output.json is used when no output file is given."""
        input_file = write_json("input.json", {"id": "1"})
        mapping_file = write_json("mapping.json", profile_mapping)

        with self.runner.isolated_filesystem():
            result = self.runner.invoke(main, [str(input_file), str(mapping_file)])

            assert result.exit_code == 0
            assert "Transformation completed → output.json" in result.output
            assert json.loads(Path("output.json").read_text(encoding="utf-8")) == {"id": "1"}

    def test_missing_arguments(self, write_json):
        """Test that a missing mapping file argument prints usage and fails."""
        input_file = write_json("input.json", {})

        result = self.runner.invoke(main, [str(input_file)])

        assert result.exit_code != 0
        assert "Usage:" in result.output

    def test_nonexistent_input_file(self, temp_dir, write_json):
        """Test that click rejects an input file that does not exist."""
        mapping_file = write_json("mapping.json", {})

        result = self.runner.invoke(main, [str(temp_dir / "nope.json"), str(mapping_file)])

        assert result.exit_code != 0

    def test_invalid_json_fails(self, temp_dir, write_json):
        """Test that invalid input JSON exits with status 1."""
        input_file = temp_dir / "input.json"
        input_file.write_text("{broken", encoding="utf-8")
        mapping_file = write_json("mapping.json", {"id": "id"})
        output_file = temp_dir / "out.json"

        result = self.runner.invoke(main, [str(input_file), str(mapping_file), str(output_file)])

        assert result.exit_code == 1
        assert "Transformation failed" in result.output
        assert "Invalid JSON input" in result.output
        assert not output_file.exists()

    def test_unwritable_output_fails(self, temp_dir, write_json):
        """Test that a directory as output path exits with status 1."""
        input_file = write_json("input.json", {"id": "1"})
        mapping_file = write_json("mapping.json", {"id": "id"})
        (temp_dir / "taken").mkdir()

        result = self.runner.invoke(main, [str(input_file), str(mapping_file), str(temp_dir / "taken")])

        assert result.exit_code != 0

    def test_transform_warnings_are_shown(self, temp_dir, write_json):
        """Test that skipped transform entries are reported but not fatal."""
        input_file = write_json("input.json", {"id": "1"})
        mapping_file = write_json("mapping.json", {
            "id": "id",
            "country": {"$transform": "nope", "$path": "id"}
        })
        output_file = temp_dir / "out.json"

        result = self.runner.invoke(main, [str(input_file), str(mapping_file), str(output_file)])

        assert result.exit_code == 0
        assert "country: Unknown transform: nope" in result.output
        assert json.loads(output_file.read_text(encoding="utf-8")) == {"id": "1"}

    def test_workers_and_indent_options(self, temp_dir, write_json, person_batch, profile_mapping):
        """Test parallel mapping and custom indentation from the command line."""
        input_file = write_json("input.json", person_batch)
        mapping_file = write_json("mapping.json", profile_mapping)
        output_file = temp_dir / "out.json"

        result = self.runner.invoke(main, [
            str(input_file), str(mapping_file), str(output_file),
            "--workers", "2", "--indent", "4"
        ])

        assert result.exit_code == 0
        content = output_file.read_text(encoding="utf-8")
        assert content.startswith("[\n    {")
        assert [item["id"] for item in json.loads(content)] == ["1", "2"]

    def test_version(self):
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_unusable_transform_name_skips_entry(self, temp_dir, write_json):
        """Test that a null transform name drops only its own entry."""
        input_file = write_json("input.json", {"id": "123"})
        mapping_file = write_json("mapping.json", {
            "id": "id",
            "c": {"$transform": None, "$path": "id"}
        })
        output_file = temp_dir / "out.json"

        result = self.runner.invoke(main, [str(input_file), str(mapping_file), str(output_file)])

        assert result.exit_code == 0
        assert "c: Unknown transform: None" in result.output
        assert json.loads(output_file.read_text(encoding="utf-8")) == {"id": "123"}

    def test_empty_target_path_is_written(self, temp_dir, write_json):
        """Test that an empty target key does not abort the run."""
        input_file = write_json("input.json", {"id": "123"})
        mapping_file = write_json("mapping.json", {"": "id", "id": "id"})
        output_file = temp_dir / "out.json"

        result = self.runner.invoke(main, [str(input_file), str(mapping_file), str(output_file)])

        assert result.exit_code == 0
        assert json.loads(output_file.read_text(encoding="utf-8")) == {"": "123", "id": "123"}

    def test_profile_option_prints_summary(self, temp_dir, write_json, person_batch, profile_mapping):
        """Test that --profile reports the run's throughput."""
        input_file = write_json("input.json", person_batch)
        mapping_file = write_json("mapping.json", profile_mapping)

        result = self.runner.invoke(main, [
            str(input_file), str(mapping_file), str(temp_dir / "out.json"), "--profile"
        ])

        assert result.exit_code == 0
        assert "2 records in" in result.output
