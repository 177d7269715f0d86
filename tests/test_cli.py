"""Tests for the command-line interface."""

import json

from click.testing import CliRunner
from json_commons.cli import main


class TestCli:
    """Tests for the json-commons command group."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_prettify(self):
        """Test prettifying tokens."""
        result = self.runner.invoke(main, ["prettify", "collection_id", "spatialExtent"])

        assert result.exit_code == 0
        assert result.output.strip() == "Collection id; Spatial extent"

    def test_prettify_options(self):
        """Test separator and minimum length options."""
        result = self.runner.invoke(main, ["prettify", "-s", " | ", "--min-length", "3", "ab", "max_value"])

        assert result.exit_code == 0
        assert result.output.strip() == "ab | Max value"

    def test_normalize_url(self):
        """Test joining a base URL and a path."""
        result = self.runner.invoke(main, ["normalize-url", "https://api.example.com/", "/jobs/"])

        assert result.exit_code == 0
        assert result.output.strip() == "https://api.example.com/jobs"

    def test_placeholders(self):
        """Test placeholder substitution with repeated keys."""
        result = self.runner.invoke(main, [
            "placeholders", "Error in {field}: {msg}",
            "--var", "field=bands", "--var", "msg=required", "--var", "msg=non-empty",
        ])

        assert result.exit_code == 0
        assert result.output.strip() == "Error in bands: required; non-empty"

    def test_placeholders_bad_variable(self):
        """Test rejection of malformed variables."""
        result = self.runner.invoke(main, ["placeholders", "{a}", "--var", "novalue"])

        assert result.exit_code != 0
        assert "key=value" in result.output

    def test_links(self, links_file):
        """Test curating links from an API object."""
        result = self.runner.invoke(main, ["links", str(links_file)])

        assert result.exit_code == 0
        curated = json.loads(result.output)
        assert [link["title"] for link in curated] == ["About", "All collections", "example.net/docs", "License"]

    def test_links_options(self, links_file):
        """Test sorting and ignore options."""
        result = self.runner.invoke(main, ["links", str(links_file), "--no-sort", "-i", "parent", "-i", "about"])

        assert result.exit_code == 0
        curated = json.loads(result.output)
        assert [link.get("rel") for link in curated] == ["self", "license", None]

    def test_links_invalid_json(self, temp_dir):
        """Test error reporting for unreadable input."""
        path = temp_dir / "broken.json"
        path.write_text("{not json", encoding='utf-8')

        result = self.runner.invoke(main, ["links", str(path)])

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_validate_ok(self, links_file):
        """Test validating a well-formed file."""
        result = self.runner.invoke(main, ["validate", str(links_file)])

        assert result.exit_code == 0
        assert "OK" in result.output

    def test_validate_links(self, links_file):
        """Test validating a link list with warnings."""
        result = self.runner.invoke(main, ["validate", "--links", str(links_file)])

        assert result.exit_code == 0
        assert "warning: links[4] has no 'rel'" in result.output

    def test_validate_invalid(self, temp_dir):
        """Test validating a file with syntax errors."""
        path = temp_dir / "broken.json"
        path.write_text('{"links": [}', encoding='utf-8')

        result = self.runner.invoke(main, ["validate", str(path)])

        assert result.exit_code == 1
        assert "error: syntax" in result.output

    def test_validate_too_deep(self, temp_dir):
        """Test validating a file nested too deeply to decode."""
        path = temp_dir / "deep.json"
        path.write_text("[" * 100000 + "]" * 100000, encoding='utf-8')

        result = self.runner.invoke(main, ["validate", str(path)])
        assert result.exit_code == 1
        assert "error: structure" in result.output

        result = self.runner.invoke(main, ["validate", "--links", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_verbose_flag(self):
        """Test that the verbose flag is accepted."""
        result = self.runner.invoke(main, ["-v", "normalize-url", "https://x.org/"])

        assert result.exit_code == 0
        assert "https://x.org" in result.output
