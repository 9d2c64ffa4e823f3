"""AWS stub tests for the Step Functions state machine DAO."""

from datetime import datetime, timezone

import boto3
from botocore.stub import Stubber

from arnav_core import navigation


def test_fetch_state_machine_passes_full_arn(monkeypatch):
    session = boto3.session.Session(region_name="us-east-1")
    client = session.client("stepfunctions")
    stubber = Stubber(client)

    arn = "arn:aws:states:us-east-1:123456789012:stateMachine:Orders"
    stubber.add_response(
        "describe_state_machine",
        {
            "stateMachineArn": arn,
            "name": "Orders",
            "definition": "{}",
            "roleArn": "arn:aws:iam::123456789012:role/sfn",
            "type": "STANDARD",
            "creationDate": datetime(2024, 1, 1, tzinfo=timezone.utc),
        },
        expected_params={"stateMachineArn": arn},
    )

    monkeypatch.setattr(session, "client", lambda name: client)

    with stubber:
        target, resource = navigation.fetch(arn, session)

    assert target.key == "stepfunctions/state-machines"
    assert resource.name == "Orders"
    assert resource.id == arn
    assert "ResponseMetadata" not in resource.data
