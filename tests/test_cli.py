"""
Tests for the command line entry point
"""

import json
import logging
from unittest.mock import MagicMock, patch

import pytest

from splitdns_sync import cli
from splitdns_sync.exceptions import DeviceListError, UpdateError
from splitdns_sync.services import SyncPreview


@pytest.fixture
def fake_service():
    service = MagicMock()
    service.run_cycle.return_value = {"example.com": ["100.64.0.1"]}
    with patch.object(cli, "initialize_sync_service", return_value=service) as init:
        service.init = init
        yield service


def test_one_shot_success(fake_service):
    assert cli.main(["--config", "config.json", "--api-key", "k"]) == 0

    fake_service.run_cycle.assert_called_once()
    fake_service.__exit__.assert_called_once()


def test_one_shot_failure_exits_non_zero(fake_service, caplog):
    fake_service.run_cycle.side_effect = UpdateError("updating split DNS: boom")

    assert cli.main(["--config", "config.json"]) == 1
    assert "Failed to update DNS: updating split DNS: boom" in caplog.text


def test_flags_passed_to_service(fake_service):
    cli.main([
        "--config", "/etc/split.json",
        "--tailnet", "example.com",
        "--api-key", "tskey-api-test",
        "--client-id", "cid",
        "--client-secret", "secret",
        "--base-url", "http://localhost:8080",
        "--timeout", "15",
    ])

    fake_service.init.assert_called_once_with(
        config_path="/etc/split.json",
        tailnet="example.com",
        api_key="tskey-api-test",
        client_id="cid",
        client_secret="secret",
        base_url="http://localhost:8080",
        timeout=15.0
    )


def test_defaults_from_environment(fake_service, monkeypatch):
    monkeypatch.setenv("TAILSCALE_API_KEY", "env-key")
    monkeypatch.setenv("TAILSCALE_CLIENT_ID", "env-cid")
    monkeypatch.setenv("TAILSCALE_CLIENT_SECRET", "env-secret")
    monkeypatch.setenv("SPLITDNS_CONFIG", "/env/config.json")
    monkeypatch.setenv("TAILSCALE_API_TIMEOUT", "7")

    cli.main([])

    fake_service.init.assert_called_once_with(
        config_path="/env/config.json",
        tailnet="-",
        api_key="env-key",
        client_id="env-cid",
        client_secret="env-secret",
        base_url="https://api.tailscale.com",
        timeout=7.0
    )


def test_builtin_defaults(fake_service):
    cli.main([])

    kwargs = fake_service.init.call_args.kwargs
    assert kwargs["config_path"] == "/config.json"
    assert kwargs["tailnet"] == "-"
    assert kwargs["api_key"] == ""
    assert kwargs["base_url"] == "https://api.tailscale.com"
    assert kwargs["timeout"] is None


def test_env_file_is_loaded(fake_service, tmp_path, monkeypatch):
    # Registered so the value loaded from the file is removed afterwards
    monkeypatch.setenv("TAILSCALE_API_KEY", "")
    env_file = tmp_path / "sync.env"
    env_file.write_text("TAILSCALE_API_KEY=from-env-file\n")

    cli.main(["--env-file", str(env_file)])

    assert fake_service.init.call_args.kwargs["api_key"] == "from-env-file"


def test_env_file_logging_settings(fake_service, tmp_path, monkeypatch):
    """Test LOG_LEVEL and LOG_FILE from --env-file are applied"""
    monkeypatch.setenv("LOG_LEVEL", "")
    monkeypatch.setenv("LOG_FILE", "")
    log_path = tmp_path / "sync.log"
    env_file = tmp_path / "sync.env"
    env_file.write_text(f"LOG_LEVEL=debug\nLOG_FILE={log_path}\n")

    root = logging.getLogger()
    before = list(root.handlers)
    with patch("logging.basicConfig") as basic_config:
        try:
            cli.main(["--env-file", str(env_file)])
        finally:
            added = [h for h in root.handlers if h not in before]
            for handler in added:
                root.removeHandler(handler)
                handler.close()

    assert basic_config.call_args.kwargs["level"] == logging.DEBUG
    assert [h.baseFilename for h in added] == [str(log_path)]


def test_invalid_interval(fake_service, caplog):
    assert cli.main(["--interval", "soon"]) == 1
    assert "Invalid interval" in caplog.text
    fake_service.init.assert_not_called()


def test_daemon_mode_uses_run_loop(fake_service):
    with patch.object(cli, "RunLoop") as loop_cls, patch.object(cli, "_install_stop_handler") as install:
        loop_cls.return_value.is_daemon = True
        assert cli.main(["--interval", "5m"]) == 0

    loop_cls.assert_called_once_with(fake_service.run_cycle, interval=300.0)
    loop_cls.return_value.run.assert_called_once()
    install.assert_called_once_with(loop_cls.return_value)


def test_daemon_cycle_failure_does_not_exit(fake_service):
    """Test daemon mode only stops when told to, even if every cycle fails"""
    fake_service.run_cycle.side_effect = DeviceListError("listing devices: boom")
    real_loop = cli.RunLoop

    def build_loop(cycle, interval):
        loop = real_loop(cycle, interval=interval)
        original = loop._run_logged

        def run_logged():
            original()
            if loop.cycles_run >= 3:
                loop.stop()

        loop._run_logged = run_logged
        return loop

    with patch.object(cli, "RunLoop", side_effect=build_loop), patch.object(cli, "_install_stop_handler"):
        assert cli.main(["--interval", "0.01"]) == 0

    assert fake_service.run_cycle.call_count == 3


def test_dry_run_prints_preview(fake_service, capsys):
    fake_service.preview.return_value = SyncPreview(
        table={"example.com": ["100.64.0.1"]}, current=None, diff=None
    )

    assert cli.main(["--dry-run", "--format", "json"]) == 0

    output = json.loads(capsys.readouterr().out)
    assert output["split_dns"] == {"example.com": ["100.64.0.1"]}
    fake_service.run_cycle.assert_not_called()


def test_dry_run_resolution_failure(fake_service, caplog):
    fake_service.preview.side_effect = DeviceListError("listing devices: boom")

    assert cli.main(["--dry-run"]) == 1
    assert "Failed to resolve split DNS" in caplog.text


# ============================================================================
# Startup failures, with the real service factory
# ============================================================================

def test_missing_config_file(tmp_path, caplog):
    caplog.set_level(logging.ERROR)

    assert cli.main(["--config", str(tmp_path / "missing.json"), "--api-key", "k"]) == 1
    assert "Failed to load config" in caplog.text


def test_no_credentials(write_config, caplog):
    path = write_config({"example.com": ["1.1.1.1"]})

    assert cli.main(["--config", str(path)]) == 1
    assert "Failed to create client: need either api key or oauth creds" in caplog.text


def test_invalid_base_url(write_config, caplog):
    path = write_config({"example.com": ["1.1.1.1"]})

    assert cli.main(["--config", str(path), "--api-key", "k", "--base-url", "://bad"]) == 1
    assert "invalid base URL" in caplog.text


def test_invalid_timeout_env(fake_service, monkeypatch, caplog):
    monkeypatch.setenv("TAILSCALE_API_TIMEOUT", "forever")

    assert cli.main([]) == 1
    assert "Invalid TAILSCALE_API_TIMEOUT" in caplog.text


def test_daemon_startup_failure_exits_non_zero(tmp_path):
    assert cli.main(["--config", str(tmp_path / "missing.json"), "--interval", "1m"]) == 1


def test_run_exits_with_main_code():
    with patch.object(cli, "main", return_value=1):
        with pytest.raises(SystemExit) as exc_info:
            cli.run()

    assert exc_info.value.code == 1


def test_run_handles_ctrl_c():
    with patch.object(cli, "main", side_effect=KeyboardInterrupt):
        with pytest.raises(SystemExit) as exc_info:
            cli.run()

    assert exc_info.value.code == 130
