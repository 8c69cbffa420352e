"""
Unit tests for the 'show' command.
"""

from click.testing import CliRunner

from netinspect.cli.commands.show import show


class TestShowCommand:
    def test_transition(self, net_file):
        runner = CliRunner()
        result = runner.invoke(show, ["smelt", "-n", str(net_file)])

        assert result.exit_code == 0
        assert "Transition" in result.output
        assert "Smelt" in result.output
        assert "COST 3.5" in result.output
        assert "Iron Ore" in result.output
        assert "0 - 1" in result.output

    def test_place_with_metadata(self, net_file):
        runner = CliRunner()
        result = runner.invoke(show, ["ingot", "-n", str(net_file)])

        assert result.exit_code == 0
        assert "Place" in result.output
        assert "KG (0)" in result.output
        assert "Anvil" in result.output
        assert "Robot" in result.output
        assert "Refine" in result.output

    def test_unknown_node(self, net_file):
        runner = CliRunner()
        result = runner.invoke(show, ["ghost", "-n", str(net_file)])

        assert result.exit_code == 0
        assert "No node found: ghost" in result.output

    def test_directory_argument(self, net_file):
        runner = CliRunner()
        result = runner.invoke(show, ["ore", "-n", str(net_file.parent)])

        assert result.exit_code == 0
        assert "Iron Ore" in result.output

    def test_missing_net(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(show, ["ore", "-n", str(tmp_path / "none.json")])

        assert result.exit_code == 1
        assert "Net file not found" in result.output
