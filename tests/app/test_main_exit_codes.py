import json
import sys

from minride_data.app import main as main_mod
from minride_data.app.build import build as real_build
from minride_data.io.run_logging import _default_json_logger


def test_main_returns_zero_and_writes_default_counts(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main_mod, "build", lambda: real_build(use_logging=False))
    assert main_mod.main() == 0
    data = tmp_path / "Data"
    assert len((data / "drivers.csv").read_text().splitlines()) == 101
    assert len((data / "customers.csv").read_text().splitlines()) == 101
    assert len((data / "rides.csv").read_text().splitlines()) == 501


def test_main_returns_one_when_output_cannot_be_written(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Data").write_text("a file where the directory should be")
    monkeypatch.setattr(main_mod, "build", lambda: real_build(use_logging=False))
    assert main_mod.main() == 1
    assert [p.name for p in tmp_path.iterdir()] == ["Data"]


def test_main_logs_run_error_as_json_on_failure(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "Data").write_text("")
    log = _default_json_logger()
    log.handlers[0].setStream(sys.stdout)  # handler may predate capsys

    assert main_mod.main() == 1

    events = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert [e["msg"] for e in events] == ["run_start", "run_error"]
    err = events[-1]
    assert err["level"] == "ERROR"
    assert err["logger"] == "minride_data"
    assert err["error_type"] == "DatasetWriteError"
    assert err["run_id"] == "local"
