"""AWS stub tests for the EC2 instance DAO."""

import boto3
import pytest
from botocore.stub import Stubber

from arnav_core.dao.ec2_instances import EC2InstanceDAO
from arnav_core.errors import ResourceNotFoundError


RESERVATION = {
    "OwnerId": "123456789012",
    "Instances": [
        {"InstanceId": "i-abc123", "Tags": [{"Key": "Name", "Value": "web-1"}]},
    ],
}


def test_ec2_get_uses_name_tag_and_builds_arn(monkeypatch):
    session = boto3.session.Session(region_name="us-east-1")
    client = session.client("ec2")
    stubber = Stubber(client)

    stubber.add_response(
        "describe_instances",
        {"Reservations": [RESERVATION]},
        expected_params={"InstanceIds": ["i-abc123"]},
    )

    monkeypatch.setattr(session, "client", lambda name: client)

    with stubber:
        resource = EC2InstanceDAO(session).get("i-abc123")

    assert resource.name == "web-1"
    assert resource.arn == "arn:aws:ec2:us-east-1:123456789012:instance/i-abc123"


def test_ec2_get_empty_reservations_raises_not_found(monkeypatch):
    session = boto3.session.Session(region_name="us-east-1")
    client = session.client("ec2")
    stubber = Stubber(client)

    stubber.add_response(
        "describe_instances",
        {"Reservations": []},
        expected_params={"InstanceIds": ["i-gone"]},
    )

    monkeypatch.setattr(session, "client", lambda name: client)

    with stubber:
        with pytest.raises(ResourceNotFoundError):
            EC2InstanceDAO(session).get("i-gone")


def test_ec2_list_walks_reservations(monkeypatch):
    session = boto3.session.Session(region_name="us-east-1")
    client = session.client("ec2")
    stubber = Stubber(client)

    stubber.add_response(
        "describe_instances",
        {
            "Reservations": [
                RESERVATION,
                {"OwnerId": "123456789012", "Instances": [{"InstanceId": "i-def456"}]},
            ]
        },
        expected_params={},
    )

    monkeypatch.setattr(session, "client", lambda name: client)

    with stubber:
        resources = list(EC2InstanceDAO(session).list_resources())

    assert [(r.id, r.name) for r in resources] == [("i-abc123", "web-1"), ("i-def456", "i-def456")]
