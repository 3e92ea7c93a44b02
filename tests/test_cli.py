"""
Tests for the chunder CLI.
"""

import json

import pytest
from click.testing import CliRunner

from chunder.cli import main
from chunder.config import Config


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def data_dir(tmp_path):
    return str(tmp_path)


class TestResolveCommand:
    """Tests for `chunder resolve`."""

    def test_edge(self, runner, data_dir):
        """Test resolving an edge."""
        result = runner.invoke(main, ["resolve", "--edge", "sydney", "--data-dir", data_dir])

        assert result.exit_code == 0
        assert result.output.strip() == "chunderw-vpc-gll-au1.twilio.com"

    def test_region_warns(self, runner, data_dir):
        """Test resolving a region prints the advisory."""
        result = runner.invoke(main, ["resolve", "--region", "us-va", "--data-dir", data_dir])

        assert result.exit_code == 0
        assert "chunderw-vpc-gll-us1.twilio.com" in result.output
        assert "ashburn" in result.output

    def test_both_fails(self, runner, data_dir):
        """Test edge and region together exit with an error."""
        result = runner.invoke(
            main, ["resolve", "--edge", "sydney", "--region", "au1", "--data-dir", data_dir]
        )

        assert result.exit_code == 1
        assert "twilio.com" not in result.output

    def test_json(self, runner, data_dir):
        """Test JSON output includes the advisory."""
        result = runner.invoke(
            main, ["resolve", "--region", "gll", "--json", "--data-dir", data_dir]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["uri"] == "chunderw-vpc-gll.twilio.com"
        assert 'please use `edge` "roaming"' in data["deprecation"]

    def test_legacy(self, runner, data_dir):
        """Test legacy resolution reports the successor region."""
        result = runner.invoke(
            main, ["resolve", "--legacy", "--region", "jp", "--json", "--data-dir", data_dir]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["uri"] == "chunderw-vpc-gll-jp1.twilio.com"
        assert '"jp1"' in data["deprecation"]

    def test_uses_saved_config(self, runner, tmp_path):
        """Test the saved edge is used when no options are given."""
        Config(data_dir=tmp_path, edge="umatilla").save()

        result = runner.invoke(main, ["resolve", "--data-dir", str(tmp_path)])

        assert result.exit_code == 0
        assert result.output.strip() == "chunderw-vpc-gll-us2.twilio.com"

    def test_no_warn(self, runner, tmp_path):
        """Test advisories are hidden when warnings are turned off."""
        Config(data_dir=tmp_path, region="br", warn_deprecated=False).save()

        result = runner.invoke(main, ["resolve", "--data-dir", str(tmp_path)])

        assert result.exit_code == 0
        assert result.output.strip() == "chunderw-vpc-gll-br1.twilio.com"


class TestShortcodeCommand:
    """Tests for `chunder shortcode`."""

    def test_known(self, runner):
        """Test a known shortcode prints its region."""
        result = runner.invoke(main, ["shortcode", "EU_IRELAND"])

        assert result.exit_code == 0
        assert result.output.strip() == "ie1"

    def test_unknown(self, runner):
        """Test an unknown shortcode exits with an error."""
        result = runner.invoke(main, ["shortcode", "NOWHERE"])
        assert result.exit_code == 1


class TestListCommands:
    """Tests for `chunder edges` and `chunder regions`."""

    def test_edges(self, runner):
        """Test the edge table lists edges."""
        result = runner.invoke(main, ["edges"])

        assert result.exit_code == 0
        assert "sao-paulo" in result.output
        assert "roaming" in result.output

    def test_regions(self, runner):
        """Test the region tables list current and deprecated regions."""
        result = runner.invoke(main, ["regions"])

        assert result.exit_code == 0
        assert "us1-tnx" in result.output
        assert "us-or" in result.output


class TestConfigCommand:
    """Tests for `chunder config`."""

    def test_set_edge(self, runner, tmp_path):
        """Test saving a default edge clears the region."""
        Config(data_dir=tmp_path, region="ie1").save()

        result = runner.invoke(main, ["config", "--edge", "dublin", "--data-dir", str(tmp_path)])

        assert result.exit_code == 0
        config = Config.load(tmp_path)
        assert config.edge == "dublin"
        assert config.region is None

    def test_both_rejected(self, runner, tmp_path):
        """Test edge and region cannot both be saved."""
        result = runner.invoke(
            main, ["config", "--edge", "dublin", "--region", "ie1", "--data-dir", str(tmp_path)]
        )

        assert result.exit_code == 1
        assert not Config.exists(tmp_path)

    def test_clear(self, runner, tmp_path):
        """Test clearing the saved defaults."""
        Config(data_dir=tmp_path, edge="tokyo").save()

        result = runner.invoke(main, ["config", "--clear", "--no-warn", "--data-dir", str(tmp_path)])

        assert result.exit_code == 0
        config = Config.load(tmp_path)
        assert config.edge is None
        assert config.warn_deprecated is False


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
