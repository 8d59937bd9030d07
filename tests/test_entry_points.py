"""Tests that the CLI entry point parses flags and resolves as a module."""

import importlib.util
import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from alcomonitor.app import main, parse_script
from alcomonitor.services.config import (
    ENV_RANDOM_SEED,
    ENV_READING_INTERVAL,
    MonitorSettingsManager,
)


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the real config dir and any local .env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(ENV_READING_INTERVAL, raising=False)
    monkeypatch.delenv(ENV_RANDOM_SEED, raising=False)
    settings_path = tmp_path / "settings.json"
    monkeypatch.setattr(
        "alcomonitor.app.MonitorSettingsManager",
        lambda path=None: MonitorSettingsManager(path or settings_path, env_path=None),
    )
    return settings_path


class TestModuleResolution:
    @pytest.mark.parametrize(
        "module_path",
        [
            pytest.param("alcomonitor", id="package"),
            pytest.param("alcomonitor.__main__", id="dunder_main"),
            pytest.param("alcomonitor.app", id="app"),
        ],
    )
    def test_module_resolves(self, module_path: str) -> None:
        assert importlib.util.find_spec(module_path) is not None


class TestExport:
    def test_export_prints_default_board(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--export"]) == 0

        records = json.loads(capsys.readouterr().out)
        assert [r["label"] for r in records] == ["AAA", "BBB", "CCC", "DDD", "EEE"]
        assert records[0] == {"id": 1, "label": "AAA", "score": 950, "date": "2024-01-15"}

    def test_export_empty_board(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--export", "--empty"]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_export_uses_settings_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        custom = tmp_path / "custom.json"
        custom.write_text(
            json.dumps({"seed": [{"id": 9, "label": "QQQ", "score": 10, "date": "2024-02-02"}]})
        )

        main(["--export", "--settings", str(custom)])

        assert json.loads(capsys.readouterr().out)[0]["label"] == "QQQ"


class TestArguments:
    def test_parse_script(self) -> None:
        assert parse_script("100, 200,300") == [100, 200, 300]

    @pytest.mark.parametrize("raw", ["", "1,two", ","])
    def test_bad_script_exits(self, raw: str) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--script", raw, "--export"])
        assert excinfo.value.code == 2

    @pytest.mark.parametrize("raw", ["0", "-1", "nan", "inf"])
    def test_non_positive_interval_exits(self, raw: str) -> None:
        with pytest.raises(SystemExit) as excinfo:
            main(["--interval", raw, "--export"])
        assert excinfo.value.code == 2

    def test_run_launches_app_with_overrides(self) -> None:
        with patch("alcomonitor.app.AlcoMonitorApp") as app_cls:
            app_cls.return_value.run = MagicMock()

            assert main(["--interval", "0.5", "--script", "1,2"]) == 0

            settings = app_cls.call_args.kwargs["settings"]
            source = app_cls.call_args.kwargs["source"]
            assert settings.reading_interval == 0.5
            assert [source.next_reading() for _ in range(3)] == [1, 2, 2]
            app_cls.return_value.run.assert_called_once()

    def test_log_file_configures_logging(self, tmp_path: Path) -> None:
        log_file = tmp_path / "monitor.log"
        with (
            patch("alcomonitor.app.AlcoMonitorApp") as app_cls,
            patch("alcomonitor.app.logging.basicConfig") as basic_config,
        ):
            app_cls.return_value.run = MagicMock()
            main(["--log-file", str(log_file)])

        assert basic_config.call_args.kwargs["filename"] == log_file
