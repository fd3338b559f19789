"""
Tests for the postboard CLI
"""

from click.testing import CliRunner

from postboard import __version__
from postboard.cli import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_export_schema_to_stdout():
    result = CliRunner().invoke(cli, ["export-schema"])

    assert result.exit_code == 0
    assert "type Query" in result.output
    assert "enum AvatarSizes" in result.output


def test_export_schema_to_file(tmp_path):
    output = tmp_path / "schema.graphql"

    result = CliRunner().invoke(cli, ["export-schema", "--output", str(output)])

    assert result.exit_code == 0
    assert "type Mutation" in output.read_text()
