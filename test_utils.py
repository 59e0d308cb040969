# -*- coding: utf-8 -*-
import json
import logging

import pytest

from raycore.image import Canvas, Color, parse_ppm, read_ppm_header
from raycore.utils import DEFAULT_CONFIG, Profiler, get_logger


def test_config_defaults_without_file(fresh_config, tmp_path):
    path = tmp_path / "raycore.json"
    cfg = fresh_config(str(path))
    assert cfg["ppm"]["line_width"] == 60
    assert cfg["ppm"]["max_value"] == DEFAULT_CONFIG["ppm"]["max_value"]
    assert "epsilon" not in DEFAULT_CONFIG
    # файл не создаётся неявно
    assert not path.exists()


def test_config_is_singleton(fresh_config, tmp_path):
    a = fresh_config(str(tmp_path / "a.json"))
    b = fresh_config(str(tmp_path / "b.json"))
    assert a is b


def test_config_loads_file(fresh_config, tmp_path):
    path = tmp_path / "raycore.json"
    path.write_text(json.dumps({"canvas": {"width": 10, "height": 5}}),
                    encoding="utf-8")
    cfg = fresh_config(str(path))
    assert cfg["canvas"] == {"width": 10, "height": 5}
    # отсутствующие ключи берутся из значений по‑умолчанию
    assert cfg["ppm"]["max_value"] == 255
    assert cfg.get("missing", 42) == 42


def test_config_save(fresh_config, tmp_path):
    path = tmp_path / "raycore.json"
    cfg = fresh_config(str(path))
    cfg["ppm"] = {"line_width": 70, "max_value": 15}
    cfg.save()
    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["ppm"] == {"line_width": 70, "max_value": 15}


def test_config_broken_file_falls_back(fresh_config, tmp_path, caplog):
    path = tmp_path / "raycore.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="raycore"):
        cfg = fresh_config(str(path))
    assert cfg["ppm"] == DEFAULT_CONFIG["ppm"]
    assert "[Config] Failed to read config" in caplog.text


def test_defaults_not_shared_between_instances(fresh_config, tmp_path):
    cfg = fresh_config(str(tmp_path / "raycore.json"))
    cfg["ppm"]["line_width"] = 10
    assert DEFAULT_CONFIG["ppm"]["line_width"] == 60


def test_profiler_measures_and_logs(caplog):
    with caplog.at_level(logging.DEBUG, logger="raycore"):
        with Profiler("block") as prof:
            sum(range(1000))
    assert prof.elapsed_ms >= 0.0
    assert "[Profiler] block:" in caplog.text


def test_ppm_export_is_profiled(caplog):
    with caplog.at_level(logging.DEBUG, logger="raycore"):
        Canvas(4, 2).to_ppm()
    assert "[Profiler] canvas_to_ppm 4x2" in caplog.text


def test_ppm_settings_from_config_drive_export(fresh_config, tmp_path):
    path = tmp_path / "raycore.json"
    path.write_text(json.dumps({"ppm": {"line_width": 10, "max_value": 15}}),
                    encoding="utf-8")
    ppm_cfg = fresh_config(str(path))["ppm"]
    canvas = Canvas(2, 1)
    canvas.fill(Color(1.0, 0.5, 0.0))
    ppm = canvas.to_ppm(ppm_cfg["line_width"], ppm_cfg["max_value"])
    assert read_ppm_header(ppm).max_value == 15
    assert parse_ppm(ppm).tolist() == [[[15, 8, 0], [15, 8, 0]]]


def test_component_loggers_are_children_of_raycore():
    assert get_logger("image.ppm").name == "raycore.image.ppm"
    assert get_logger("config").parent.name == "raycore"


def test_ppm_export_logs_under_component_logger(caplog):
    with caplog.at_level(logging.DEBUG, logger="raycore"):
        Canvas(2, 2).to_ppm()
    names = {r.name for r in caplog.records if "[Profiler]" in r.getMessage()}
    assert names == {"raycore.image.ppm"}


def test_profiler_custom_logger_and_level(caplog):
    log = get_logger("tests")
    with caplog.at_level(logging.DEBUG, logger="raycore"):
        with Profiler("timed", log=log, level=logging.INFO):
            pass
    record = next(r for r in caplog.records if "[Profiler] timed" in r.getMessage())
    assert record.name == "raycore.tests"
    assert record.levelno == logging.INFO
    assert "done in" in record.getMessage()


def test_profiler_reports_failure_and_propagates(caplog):
    with caplog.at_level(logging.DEBUG, logger="raycore"):
        with pytest.raises(ZeroDivisionError):
            with Profiler("broken") as prof:
                1 / 0
    assert prof.elapsed_ms >= 0.0
    assert "[Profiler] broken: failed in" in caplog.text
