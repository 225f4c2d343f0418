from dataclasses import FrozenInstanceError

import pytest

from lookupingress.core.models import IngressInfo, MatchResult, QueryKind


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("service", QueryKind.SERVICE),
        ("Service", QueryKind.SERVICE),
        ("DEPLOYMENT", QueryKind.DEPLOYMENT),
        (" deployment ", None),
        ("service ", None),
        ("svc", None),
        ("pod", None),
        ("", None),
    ],
)
def test_query_kind_parse(raw, expected):
    assert QueryKind.parse(raw) is expected


def test_match_result_as_record():
    result = MatchResult("web-ing", "a.example.com", "/", "web-svc")

    assert result.as_record() == {
        "ingress": "web-ing",
        "host": "a.example.com",
        "path": "/",
        "service": "web-svc",
    }


def test_models_are_immutable():
    ingress = IngressInfo(name="web-ing")

    with pytest.raises(FrozenInstanceError):
        ingress.name = "other"  # type: ignore[misc]
