"""Tests for CLI main module."""

import pytest
from unittest.mock import MagicMock, patch

import typer
from typer.testing import CliRunner

from nimbus.cli.main import _run_cli_command, app
from nimbus.errors import TemplateNotFound


runner = CliRunner()


@pytest.fixture
def config_dir(tmp_path):
    """Create a minimal configuration tree."""
    (tmp_path / "templates").mkdir()
    (tmp_path / "config.yaml").write_text("default_provider: aws-ec2\n")
    (tmp_path / "templates" / "web.yaml").write_text("""
web:
  inbound_ports: [22, 80]
  key_pair: deploy
""")
    return tmp_path


@patch("nimbus.cli.main.ProviderRegistry")
@patch("nimbus.cli.main.ConfigManager")
@patch("nimbus.cli.main.console")
def test_run_cli_command_success(mock_console, mock_manager, mock_registry):
    """Test the CLI command runner on a successful execution."""
    mock_handler = MagicMock(return_value=True)
    
    result = _run_cli_command(mock_handler, "/tmp/configs", name="web")
    
    mock_manager.assert_called_once_with("/tmp/configs")
    mock_manager.return_value.load.assert_called_once()
    mock_registry.return_value.initialize.assert_called_once_with(mock_manager.return_value.config)
    
    # Verify the handler was called with the loaded state and arguments
    mock_handler.assert_called_once_with(
        mock_manager.return_value, mock_registry.return_value, name="web"
    )
    assert result is True
    mock_console.print.assert_not_called()


@patch("nimbus.cli.main.ProviderRegistry")
@patch("nimbus.cli.main.ConfigManager")
@patch("nimbus.cli.main.console")
def test_run_cli_command_error(mock_console, mock_manager, mock_registry):
    """Test the CLI command runner when a nimbus error is raised."""
    mock_handler = MagicMock(side_effect=TemplateNotFound("Template not found: db"))
    
    with pytest.raises(typer.Exit) as exc_info:
        _run_cli_command(mock_handler, "/tmp/configs", name="db")
        
    mock_console.print.assert_called_once_with("[red]Error:[/red] Template not found: db")
    assert exc_info.value.exit_code == 1


@patch("nimbus.cli.main.setup_logging")
class TestCommands:
    """Test commands through the Typer app."""

    def test_providers(self, mock_logging):
        """Test listing providers."""
        result = runner.invoke(app, ["providers"])

        assert result.exit_code == 0
        assert "aws-ec2" in result.output
        assert "softlayer" in result.output
        mock_logging.assert_called_once_with("WARNING")

    def test_log_level_option(self, mock_logging):
        """Test that --log-level reaches the logging setup."""
        result = runner.invoke(app, ["--log-level", "DEBUG", "providers"])

        assert result.exit_code == 0
        mock_logging.assert_called_once_with("DEBUG")

    def test_validate(self, mock_logging, config_dir):
        """Test validating a good configuration."""
        result = runner.invoke(app, ["validate", "--config-dir", str(config_dir)])

        assert result.exit_code == 0
        assert "Configuration is valid" in result.output

    def test_validate_invalid(self, mock_logging, config_dir):
        """Test validating a broken template."""
        (config_dir / "templates" / "bad.yaml").write_text("bad:\n  provider: generic\n  spot_price: 0.3\n")

        result = runner.invoke(app, ["validate", "--config-dir", str(config_dir)])

        assert result.exit_code == 1
        assert "Configuration is invalid" in result.output

    def test_show(self, mock_logging, config_dir):
        """Test showing a template."""
        result = runner.invoke(app, ["show", "web", "--config-dir", str(config_dir)])

        assert result.exit_code == 0
        assert "deploy" in result.output
        assert "inbound_ports" in result.output

    def test_show_missing(self, mock_logging, config_dir):
        """Test showing an unknown template."""
        result = runner.invoke(app, ["show", "db", "--config-dir", str(config_dir)])

        assert result.exit_code == 1
        assert "Template not found: db" in result.output

    def test_missing_config_dir(self, mock_logging, tmp_path):
        """Test pointing at a directory without config.yaml."""
        result = runner.invoke(app, ["validate", "--config-dir", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "Main config not found" in result.output
