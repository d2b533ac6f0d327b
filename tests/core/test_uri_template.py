from __future__ import annotations

import itertools

import pytest

from jobportal.core.uri_template import (
    LiteralSegment,
    MalformedTemplateError,
    PathVariable,
    QueryVariables,
    UriTemplate,
    parse_template,
)


def test_parse_produces_ordered_segments():
    segments = parse_template("jobs://filter{?title,location}")

    assert segments == (
        LiteralSegment("jobs://filter"),
        QueryVariables(("title", "location")),
    )
    assert parse_template("profile://{id}") == (LiteralSegment("profile://"), PathVariable("id"))


@pytest.mark.parametrize(
    "pattern",
    [
        "",
        "jobs://filter{?a}{?b}",
        "jobs://filter{?a}/more",
        "jobs://{?a}{id}",
        "profile://{{id}}",
        "profile://{id",
        "profile://id}",
        "profile://{}",
        "profile://{1id}",
        "jobs://filter{?a,,b}",
        "jobs://filter{?a,a}",
        "x://{a}{b}",
    ],
)
def test_malformed_templates_fail_fast(pattern: str):
    with pytest.raises(MalformedTemplateError):
        UriTemplate(pattern)


def test_template_is_immutable():
    template = UriTemplate("profile://{id}")

    with pytest.raises(AttributeError):
        template.pattern = "job://{id}"  # type: ignore[misc]


def test_extract_path_variable():
    template = UriTemplate("profile://{id}")

    assert template.match("profile://42") == {"id": "42"}


def test_scheme_mismatch_is_no_match():
    template = UriTemplate("profile://{id}")

    assert template.match("profiles://42") is None
    assert template.match("Profile://42") is None
    assert template.match("profile://") is None
    assert template.match("profile://42/extra") is None


def test_extract_query_variables_leaves_missing_unbound():
    template = UriTemplate("jobs://filter{?title,location}")

    assert template.match("jobs://filter?location=Remote") == {"location": "Remote"}
    assert template.match("jobs://filter") == {}


def test_extract_ignores_unknown_query_keys():
    template = UriTemplate("jobs://filter{?title,location}")

    assert template.match("jobs://filter?salary=10&title=Dev") == {"title": "Dev"}


def test_repeated_query_parameters_bind_all_values():
    template = UriTemplate("jobs://filter{?skillsRequired}")

    bound = template.match("jobs://filter?skillsRequired=SEO&skillsRequired=SEM")

    assert bound == {"skillsRequired": ["SEO", "SEM"]}


def test_repeated_path_variable_binds_sequence():
    template = UriTemplate("pair://{id}/{id}")

    assert template.match("pair://1/2") == {"id": ["1", "2"]}


def test_values_are_percent_decoded():
    template = UriTemplate("jobs://filter{?title}")

    assert template.match("jobs://filter?title=UI%2FUX+Designer") == {"title": "UI/UX Designer"}
    assert UriTemplate("tag://{name}").match("tag://Node%2Ejs") == {"name": "Node.js"}


def test_query_without_query_segment_is_no_match():
    template = UriTemplate("profile://{id}")

    assert template.match("profile://1?x=1") is None


def test_complete_uses_substring_containment():
    template = UriTemplate("profile://{id}")

    assert list(template.complete("id", "2", ["1", "2", "12"])) == ["2", "12"]
    assert list(template.complete("id", "9", [1, 2, 12])) == []
    assert list(template.complete("id", "", [1, 2])) == ["1", "2"]


def test_complete_unknown_variable_is_empty():
    template = UriTemplate("profile://{id}")

    assert list(template.complete("name", "a", ["abc"])) == []


def test_complete_is_lazy():
    template = UriTemplate("profile://{id}")
    consumed: list[int] = []

    def source():
        for value in itertools.count(1):
            consumed.append(value)
            yield value

    first_two = list(itertools.islice(template.complete("id", "1", source()), 2))

    assert first_two == ["1", "10"]
    assert consumed[-1] == 10


def test_expand_round_trips_through_match():
    template = UriTemplate("jobs://filter{?title,location}")

    uri = template.expand({"title": "UI/UX Designer", "location": None})

    assert uri == "jobs://filter?title=UI%2FUX+Designer"
    assert template.match(uri) == {"title": "UI/UX Designer"}
    assert UriTemplate("profile://{id}").expand({"id": 7}) == "profile://7"


def test_expand_requires_path_variables():
    with pytest.raises(KeyError):
        UriTemplate("profile://{id}").expand({})


def test_variable_names():
    template = UriTemplate("scope://{tenant}/jobs{?title,location}")

    assert template.path_variables == ("tenant",)
    assert template.query_variables == ("title", "location")
    assert template.variable_names == ("tenant", "title", "location")
