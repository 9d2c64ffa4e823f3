import pytest

from arnav_core.arn import (
    Arn,
    arn_string,
    can_navigate,
    extract_parent_filter,
    is_arn,
    parse_arn,
    service_resource_type,
    short_id,
    split_resource,
)


@pytest.mark.parametrize(
    "value, service, region, account, resource_type, resource_id",
    [
        ("arn:aws:ec2:us-east-1:123456789012:instance/i-1234567890abcdef0", "ec2", "us-east-1", "123456789012", "instance", "i-1234567890abcdef0"),
        ("arn:aws:ec2:us-west-2:123456789012:security-group/sg-12345678", "ec2", "us-west-2", "123456789012", "security-group", "sg-12345678"),
        ("arn:aws:s3:::my-bucket", "s3", "", "", "bucket", "my-bucket"),
        ("arn:aws:lambda:us-east-1:123456789012:function:my-function", "lambda", "us-east-1", "123456789012", "function", "my-function"),
        ("arn:aws:iam::123456789012:role/MyRole", "iam", "", "123456789012", "role", "MyRole"),
        ("arn:aws:ecs:us-east-1:123456789012:service/my-cluster/my-service", "ecs", "us-east-1", "123456789012", "service", "my-cluster/my-service"),
        ("arn:aws:sns:us-east-1:123456789012:my-topic", "sns", "us-east-1", "123456789012", "topic", "my-topic"),
        ("arn:aws:sqs:us-east-1:123456789012:my-queue", "sqs", "us-east-1", "123456789012", "queue", "my-queue"),
        ("arn:aws:dynamodb:us-east-1:123456789012:table/my-table", "dynamodb", "us-east-1", "123456789012", "table", "my-table"),
        ("arn:aws:rds:us-east-1:123456789012:db:my-database", "rds", "us-east-1", "123456789012", "db", "my-database"),
        ("arn:aws:states:us-east-1:123456789012:stateMachine:my-sm", "states", "us-east-1", "123456789012", "stateMachine", "my-sm"),
        ("arn:aws:logs:us-east-1:123456789012:log-group:/aws/lambda/my-function", "logs", "us-east-1", "123456789012", "log-group", "/aws/lambda/my-function"),
        ("arn:aws:secretsmanager:us-east-1:123456789012:secret:my-secret-AbCdEf", "secretsmanager", "us-east-1", "123456789012", "secret", "my-secret-AbCdEf"),
        ("arn:aws:events:us-east-1:123456789012:event-bus/my-bus", "events", "us-east-1", "123456789012", "event-bus", "my-bus"),
        ("arn:aws-us-gov:ec2:us-gov-west-1:123456789012:instance/i-12345", "ec2", "us-gov-west-1", "123456789012", "instance", "i-12345"),
    ],
)
def test_parse_arn_fields(value, service, region, account, resource_type, resource_id):
    arn = parse_arn(value)

    assert arn is not None
    assert arn.service == service
    assert arn.region == region
    assert arn.account_id == account
    assert arn.resource_type == resource_type
    assert arn.resource_id == resource_id
    assert arn.raw == value
    assert str(arn) == value


def test_parse_arn_keeps_partition():
    arn = parse_arn("arn:aws-cn:s3:::bucket-cn")
    assert arn.partition == "aws-cn"


@pytest.mark.parametrize(
    "value",
    ["", "not-an-arn", "arn:aws:ec2:us-east-1", "urn:aws:ec2:us-east-1:123:instance/i-1", "arn:aws:s3::"],
)
def test_parse_arn_rejects_non_conforming(value):
    assert parse_arn(value) is None
    assert is_arn(value) is False


def test_arn_parse_strict_raises():
    with pytest.raises(ValueError):
        Arn.parse("not-an-arn")


def test_colon_before_slash_splits_on_colon():
    assert split_resource("logs", "log-group:/aws/lambda/fn") == ("log-group", "/aws/lambda/fn")


def test_slash_before_colon_splits_on_slash():
    assert split_resource("ecs", "service/cluster/service-name") == ("service", "cluster/service-name")
    # o ':' depois da primeira '/' fica dentro do id
    assert split_resource("ecr", "repository/app/image/sha256:abc") == ("repository", "app/image/sha256:abc")


def test_colon_id_keeps_further_separators():
    assert split_resource("logs", "log-group:/aws/lambda/fn:*") == ("log-group", "/aws/lambda/fn:*")


def test_no_separator_infers_type_per_service():
    assert split_resource("s3", "my-bucket") == ("bucket", "my-bucket")
    assert split_resource("events", "default") == ("event-bus", "default")
    assert split_resource("unknown", "thing") == ("", "thing")


def test_empty_resource_part_is_not_a_failure():
    arn = parse_arn("arn:aws:ec2:us-east-1:123456789012:")
    assert arn is not None
    assert arn.resource_type == ""
    assert arn.resource_id == ""
    assert arn.short_id() == ""
    assert arn.service_resource_type() == ("ec2", "")
    assert arn.can_navigate() is False


def test_resource_property_returns_full_resource_part():
    arn = parse_arn("arn:aws:logs:us-east-1:123:log-group:/aws/lambda/fn:*")
    assert arn.resource == "log-group:/aws/lambda/fn:*"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("arn:aws:ec2:us-east-1:123456789012:instance/i-1234", "i-1234"),
        ("arn:aws:ecs:us-east-1:123456789012:service/cluster/service-name", "service-name"),
        ("arn:aws:s3:::my-bucket", "my-bucket"),
    ],
)
def test_short_id_is_last_path_segment(value, expected):
    assert parse_arn(value).short_id() == expected


def test_arn_is_immutable():
    arn = parse_arn("arn:aws:s3:::my-bucket")
    with pytest.raises(Exception):
        arn.service = "ec2"


def test_accessors_on_absent_parse_return_zero_values():
    absent = parse_arn("definitely not an arn")

    assert absent is None
    assert short_id(absent) == ""
    assert arn_string(absent) == ""
    assert service_resource_type(absent) == ("", "")
    assert can_navigate(absent) is False
    assert extract_parent_filter(absent) == ("", "")


def test_accessors_on_valid_parse_delegate():
    arn = parse_arn("arn:aws:glue:us-east-1:123:table/sales/orders")

    assert short_id(arn) == "orders"
    assert arn_string(arn) == "arn:aws:glue:us-east-1:123:table/sales/orders"
    assert service_resource_type(arn) == ("glue", "tables")
    assert can_navigate(arn) is True
    assert extract_parent_filter(arn) == ("DatabaseName", "sales")
