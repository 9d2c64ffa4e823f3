import json
from pathlib import Path

import yaml
from typer.testing import CliRunner

from arnav_cli.main import app


runner = CliRunner()


def test_cli_parse_single_arn_json():
    res = runner.invoke(
        app,
        ["parse", "arn:aws:glue:us-east-1:123456789012:table/sales/orders", "--output", "json"],
    )

    assert res.exit_code == 0, res.stdout
    payload = json.loads(res.stdout)
    assert payload["valid"] is True
    assert payload["resource_type"] == "table"
    assert payload["resource_id"] == "sales/orders"
    assert payload["short_id"] == "orders"
    assert payload["canonical"] == {"service": "glue", "resource_type": "tables"}
    assert payload["navigable"] is True
    assert payload["parent_filter"] == {"DatabaseName": "sales"}


def test_cli_parse_multiple_values_yaml_includes_plain_text():
    res = runner.invoke(app, ["parse", "arn:aws:s3:::my-bucket", "not-an-arn", "--yaml"])

    assert res.exit_code == 0, res.stdout
    rows = yaml.safe_load(res.stdout)
    assert [r["valid"] for r in rows] == [True, False]
    assert rows[0]["resource_type"] == "bucket"
    assert rows[1]["canonical"] == {"service": "", "resource_type": ""}
    assert rows[1]["navigable"] is False


def test_cli_parse_text_output():
    res = runner.invoke(app, ["parse", "arn:aws:ec2:us-east-1:123456789012:subnet/subnet-1"])

    assert res.exit_code == 0, res.stdout
    assert "vpc/subnets" in res.stdout


def test_cli_parse_masks_account_in_demo_mode(tmp_path: Path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("demo_mode: true\n", encoding="utf-8")

    res = runner.invoke(
        app,
        ["--config", str(cfg), "parse", "arn:aws:iam::999988887777:role/app", "--json"],
    )

    assert res.exit_code == 0, res.stdout
    assert json.loads(res.stdout)["account_id"] == "123456789012"


def test_cli_rejects_conflicting_output_flags():
    res = runner.invoke(app, ["parse", "arn:aws:s3:::b", "--json", "--yaml"])
    assert res.exit_code != 0


def test_cli_resolve_reports_dao_and_filters():
    res = runner.invoke(
        app,
        [
            "resolve",
            "arn:aws:guardduty:us-east-1:123456789012:detector/d1/finding/f1",
            "arn:aws:kinesis:us-east-1:123456789012:stream/clicks",
            "hello",
            "--json",
        ],
    )

    assert res.exit_code == 0, res.stdout
    finding, stream, text = json.loads(res.stdout)

    assert finding["service"] == "guardduty"
    assert finding["resource_type"] == "detectors"
    assert finding["filters"] == {"DetectorId": "d1"}
    assert finding["dao"] == "GuardDutyDetectorDAO"

    assert stream["resource_type"] == "streams"
    assert stream["dao"] is None

    assert text == {"input": "hello", "navigable": False}


def test_cli_daos_lists_registry():
    res = runner.invoke(app, ["daos", "-o", "json"])

    assert res.exit_code == 0, res.stdout
    rows = json.loads(res.stdout)
    pairs = {(r["service"], r["resource_type"]) for r in rows}
    assert ("vpc", "subnets") in pairs
    assert ("cloudwatch", "log-groups") in pairs
    glue_tables = next(r for r in rows if r["name"] == "GlueTableDAO")
    assert glue_tables["parent_filter"] == "DatabaseName"


def test_cli_log_file_option_writes_log(tmp_path: Path):
    log_path = tmp_path / "arnav.log"

    res = runner.invoke(app, ["--log-file", str(log_path), "resolve", "hello"])

    assert res.exit_code == 0, res.stdout
    assert log_path.exists()


def test_cli_invalid_config_fails(tmp_path: Path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("- a\n- b\n", encoding="utf-8")

    res = runner.invoke(app, ["--config", str(cfg), "daos"])

    assert res.exit_code != 0


def test_cli_parse_reports_explicit_or_inferred_type():
    res = runner.invoke(
        app,
        [
            "parse",
            "arn:aws:lambda:us-east-1:123456789012:function:f",
            "arn:aws:foo:us-east-1:123456789012:widget/w-1",
            "--json",
        ],
    )

    assert res.exit_code == 0, res.stdout
    explicit, inferred = json.loads(res.stdout)
    assert explicit["explicit_type"] is True
    assert inferred["explicit_type"] is False
    assert inferred["canonical"] == {"service": "foo", "resource_type": "widgets"}
    assert inferred["navigable"] is True


def test_cli_demo_mode_masks_reconstructed_parent_arn(tmp_path: Path):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("demo_mode: true\n", encoding="utf-8")
    arn = "arn:aws:access-analyzer:us-east-1:999988887777:analyzer/main/finding/f-1"

    parsed = runner.invoke(app, ["--config", str(cfg), "parse", arn, "--json"])
    resolved = runner.invoke(app, ["--config", str(cfg), "resolve", arn, "--json"])

    assert parsed.exit_code == 0, parsed.stdout
    assert resolved.exit_code == 0, resolved.stdout
    expected = {"AnalyzerArn": "arn:aws:access-analyzer:us-east-1:123456789012:analyzer/main"}
    assert json.loads(parsed.stdout)["parent_filter"] == expected
    assert json.loads(resolved.stdout)["filters"] == expected
    assert "999988887777" not in json.loads(parsed.stdout)["parent_filter"]["AnalyzerArn"]


def test_cli_resolve_marks_targets_navigable():
    res = runner.invoke(app, ["resolve", "arn:aws:s3:::my-bucket", "--json"])

    assert res.exit_code == 0, res.stdout
    row = json.loads(res.stdout)
    assert row["navigable"] is True
    assert row["dao"] == "S3BucketDAO"
