"""
Unit tests for the 'dot' command.
"""

from click.testing import CliRunner

from netinspect.cli.commands.dot import dot


class TestDotCommand:
    def test_stdout(self, net_file):
        runner = CliRunner()
        result = runner.invoke(dot, ["-n", str(net_file)])

        assert result.exit_code == 0
        assert result.output.startswith('digraph "Smelting" {')
        assert '"ore" -> "smelt"' in result.output

    def test_output_file(self, net_file, tmp_path):
        out = tmp_path / "net.dot"
        runner = CliRunner()
        result = runner.invoke(dot, ["-n", str(net_file), "-o", str(out)])

        assert result.exit_code == 0
        assert "Generated" in result.output
        assert out.read_text().startswith("digraph")

    def test_invalid_net(self, tmp_path):
        path = tmp_path / "net.json"
        path.write_text('{"id": "x"}')
        runner = CliRunner()
        result = runner.invoke(dot, ["-n", str(path)])

        assert result.exit_code == 1
        assert "Invalid net" in result.output
