import pytest

from arnav_core import actions
from arnav_core.actions import expand_variables, run_action
from arnav_core.errors import ActionError, EmptyCommandError, ReadOnlyError, UnsafeValueError
from arnav_core.models import ActionSpec, NavigationTarget, Resource


TARGET = NavigationTarget(
    arn="arn:aws:ec2:us-east-1:123456789012:instance/i-1234",
    service="ec2",
    resource_type="instances",
    resource_id="i-1234",
    short_id="i-1234",
    region="us-east-1",
)

RESOURCE = Resource(id="i-1234", name="web-1", arn=TARGET.arn)


def test_expand_variables_renders_resource_values():
    cmd = expand_variables("aws ssm start-session --target {{ id }} --region {{ region }}", RESOURCE, TARGET)
    assert cmd == "aws ssm start-session --target i-1234 --region us-east-1"


def test_expand_variables_exposes_account_and_pair():
    cmd = expand_variables("echo {{ account }} {{ service }}/{{ resource_type }}", RESOURCE, TARGET)
    assert cmd == "echo 123456789012 ec2/instances"


def test_unsafe_value_is_rejected():
    evil = Resource(id="i-1; rm -rf /", name="x")
    with pytest.raises(UnsafeValueError):
        expand_variables("echo {{ id }}", evil, TARGET)


def test_unknown_variable_raises():
    with pytest.raises(ActionError):
        expand_variables("echo {{ nope }}", RESOURCE, TARGET)


def test_empty_command_raises():
    with pytest.raises(EmptyCommandError):
        expand_variables("   ", RESOURCE, TARGET)


def test_run_action_dry_run_does_not_execute(monkeypatch):
    def _boom(*args, **kwargs):
        raise AssertionError("não deveria executar")

    monkeypatch.setattr(actions.subprocess, "run", _boom)

    result = run_action(ActionSpec(name="ssm", command="ssm {{ id }}"), RESOURCE, TARGET, dry_run=True)

    assert result.success is True
    assert result.command == "ssm i-1234"


def test_run_action_executes_command(monkeypatch):
    calls = []

    class _Completed:
        returncode = 0

    def _run(command, shell, check):
        calls.append((command, shell))
        return _Completed()

    monkeypatch.setattr(actions.subprocess, "run", _run)

    result = run_action(ActionSpec(name="echo", command="echo {{ short_id }}"), RESOURCE, TARGET)

    assert result.success is True
    assert calls == [("echo i-1234", True)]


def test_run_action_reports_failure(monkeypatch):
    class _Completed:
        returncode = 3

    monkeypatch.setattr(actions.subprocess, "run", lambda command, shell, check: _Completed())

    result = run_action(ActionSpec(name="fail", command="false"), RESOURCE, TARGET)

    assert result.success is False
    assert result.message == "exit code 3"


def test_dangerous_action_blocked_in_read_only():
    spec = ActionSpec(name="terminate", command="aws ec2 terminate-instances --instance-ids {{ id }}", dangerous=True)
    with pytest.raises(ReadOnlyError):
        run_action(spec, RESOURCE, TARGET, read_only=True)
