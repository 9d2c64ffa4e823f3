import pytest

from arnav_core.tag_filter import matches_tag_filter


TAGS = {"Env": "Production", "Team": "data-platform", "Owner": ""}


@pytest.mark.parametrize(
    "tag_filter, expected",
    [
        ("env=production", True),
        ("ENV=PRODUCTION", True),
        ("env=prod", False),
        ("missing=x", False),
        ("team~PLATFORM", True),
        ("team~infra", False),
        ("missing~x", False),
        ("owner", True),
        ("OWNER", True),
        ("cost-center", False),
    ],
)
def test_matches_tag_filter_syntaxes(tag_filter, expected):
    assert matches_tag_filter(TAGS, tag_filter) is expected


def test_partial_takes_precedence_over_equals():
    assert matches_tag_filter({"Expr": "a=b"}, "expr~a=b") is True


def test_empty_filter_matches_any_tag():
    assert matches_tag_filter(TAGS, "") is True
    assert matches_tag_filter({}, "") is False


def test_none_tags_never_match():
    assert matches_tag_filter(None, "") is False
    assert matches_tag_filter(None, "env") is False
