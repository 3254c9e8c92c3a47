import json
import logging
from unittest.mock import patch

import pytest

from wdbc_harness.__main__ import build_config, build_parser, main


def test_list_models(capsys):
    assert main(["--list-models"]) == 0
    out = capsys.readouterr().out
    for name in ("random_forest", "gradient_boosting", "xgboost", "mlp"):
        assert name in out


def test_list_datasets(capsys):
    assert main(["--list-datasets"]) == 0
    assert "wdbc" in capsys.readouterr().out


def test_flags_override_json_config(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"seed": 1, "train_fraction": 0.8, "models": ["mlp"]}))

    args = build_parser().parse_args(["--config", str(path), "--seed", "9", "--continue-on-error"])
    config = build_config(args)

    assert config.seed == 9
    assert config.train_fraction == 0.8
    assert config.models == ["mlp"]
    assert config.continue_on_error is True


def test_invalid_configuration_exit_code(capsys):
    assert main(["--train-fraction", "1.5"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_missing_config_file_exit_code(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "absent.json")]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_malformed_config_file_exit_code(tmp_path, capsys):
    path = tmp_path / "run.json"
    path.write_text("{not json")
    assert main(["--config", str(path)]) == 2
    assert "Invalid configuration" in capsys.readouterr().err


def test_unknown_model_choice_is_rejected():
    with pytest.raises(SystemExit):
        main(["--models", "svm"])


def test_harness_failure_exit_code(tmp_path, capsys):
    missing = tmp_path / "nope.csv"
    assert main(["--csv", str(missing), "--models", "random_forest"]) == 1
    assert "Harness failed" in capsys.readouterr().err


def test_quiet_raises_harness_log_level(tmp_path, restore_log_level):
    missing = tmp_path / "nope.csv"
    assert main(["--csv", str(missing), "--models", "random_forest", "--quiet"]) == 1
    assert not logging.getLogger("wdbc_harness.harness").isEnabledFor(logging.INFO)


def test_all_models_failing_exit_code(wdbc_csv, capsys):
    with patch(
        "wdbc_harness.models.adapters.RandomForestAdapter.fit",
        side_effect=RuntimeError("boom"),
    ):
        code = main(["--csv", str(wdbc_csv), "--models", "random_forest", "--continue-on-error"])

    assert code == 1
    assert "FAILED random_forest: RuntimeError: boom" in capsys.readouterr().err


@pytest.mark.integration
def test_run_writes_output(wdbc_csv, tmp_path, capsys):
    output = tmp_path / "report.json"
    code = main([
        "--csv", str(wdbc_csv),
        "--models", "random_forest",
        "--scaling", "none",
        "--output", str(output),
    ])

    assert code == 0
    assert "random_forest" in capsys.readouterr().out
    assert "random_forest" in json.loads(output.read_text())
