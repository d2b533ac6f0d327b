"""Static resources and resource templates exposed by the portal server."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping

from .core.filters import JOB_FIELDS, PROFILE_FIELDS, FieldTable, filter_records
from .core.store import EntityCollection, EntityStore
from .core.uri_template import UriTemplate, Variables
from .registry import (
    ResourceDefinition,
    ResourceResult,
    ResourceTemplateDefinition,
    format_empty_resource,
    format_resource,
)
from .schemas import PROFILE_CRITERIA_ALIASES

PROFILE_FILTER_TEMPLATE = (
    "profiles://filter{?name,email,phone,location,skills,experience,company,role}"
)
JOB_FILTER_TEMPLATE = (
    "jobs://filter{?title,company,location,experienceRequired,salary,description,skillsRequired}"
)


def build_resources(store: EntityStore) -> list[ResourceDefinition]:
    return [
        ResourceDefinition(
            name="list_profiles",
            uri="list://profiles",
            title="List All Candidate Profiles",
            description="Returns all candidate profiles on the platform.",
            handler=lambda uri: format_resource(uri, store.profiles.list()),
        ),
        ResourceDefinition(
            name="list_jobs",
            uri="list://jobs",
            title="List All Job Postings",
            description="Returns all job postings on the platform.",
            handler=lambda uri: format_resource(uri, store.jobs.list()),
        ),
    ]


def build_resource_templates(store: EntityStore) -> list[ResourceTemplateDefinition]:
    """Compile every resource template; malformed patterns fail here."""
    return [
        _record_template(
            name="profile",
            pattern="profile://{id}",
            title="Candidate Profile",
            description="A single candidate profile addressed by ID.",
            collection=store.profiles,
        ),
        _record_template(
            name="job",
            pattern="job://{id}",
            title="Job Posting",
            description="A single job posting addressed by ID.",
            collection=store.jobs,
        ),
        _filter_template(
            name="filter_profiles",
            pattern=PROFILE_FILTER_TEMPLATE,
            title="Filtered Candidate Profiles",
            description="Candidate profiles matching every supplied query parameter.",
            collection=store.profiles,
            fields=PROFILE_FIELDS,
            aliases=PROFILE_CRITERIA_ALIASES,
        ),
        _filter_template(
            name="filter_jobs",
            pattern=JOB_FILTER_TEMPLATE,
            title="Filtered Job Postings",
            description="Job postings matching every supplied query parameter.",
            collection=store.jobs,
            fields=JOB_FIELDS,
        ),
    ]


def _record_template(
    *,
    name: str,
    pattern: str,
    title: str,
    description: str,
    collection: EntityCollection,
) -> ResourceTemplateDefinition:
    def handler(uri: str, variables: Variables) -> ResourceResult:
        record_id = _parse_id(variables.get("id"))
        record = collection.get(record_id) if record_id is not None else None
        if record is None:
            return format_empty_resource()
        return format_resource(uri, record)

    return ResourceTemplateDefinition(
        name=name,
        template=UriTemplate(pattern),
        title=title,
        description=description,
        handler=handler,
        completers={"id": collection.ids},
        lister=lambda: ({"id": record_id} for record_id in collection.ids()),
    )


def _filter_template(
    *,
    name: str,
    pattern: str,
    title: str,
    description: str,
    collection: EntityCollection,
    fields: FieldTable,
    aliases: Mapping[str, str] | None = None,
) -> ResourceTemplateDefinition:
    template = UriTemplate(pattern)
    aliases = aliases or {}

    def handler(uri: str, variables: Variables) -> ResourceResult:
        records: Any = collection.list()
        for criteria in criteria_rounds(variables, aliases):
            records = filter_records(records, criteria, fields)
        return format_resource(uri, list(records))

    completers: dict[str, Callable[[], Iterable[Any]]] = {
        variable: _values_of(collection, aliases.get(variable, variable))
        for variable in template.query_variables
    }
    return ResourceTemplateDefinition(
        name=name,
        template=template,
        title=title,
        description=description,
        handler=handler,
        completers=completers,
    )


def criteria_rounds(
    variables: Mapping[str, str | list[str]],
    aliases: Mapping[str, str] | None = None,
) -> list[dict[str, str]]:
    """Split bound variables into criteria maps applied one after another.

    A variable bound to several values contributes one value per round, so
    every value must match. Blank values are skipped and ``aliases`` renames a
    variable to the criterion it filters on.
    """
    rounds: list[dict[str, str]] = []
    for name, value in variables.items():
        values = [item for item in (value if isinstance(value, list) else [value]) if item]
        criterion = (aliases or {}).get(name, name)
        for depth, item in enumerate(values):
            if len(rounds) <= depth:
                rounds.append({})
            rounds[depth][criterion] = item
    return rounds


def _values_of(collection: EntityCollection, field: str) -> Callable[[], Iterator[str]]:
    return lambda: distinct_values(collection.list(), field)


def distinct_values(records: Iterable[Mapping[str, Any]], field: str) -> Iterator[str]:
    """Yield each distinct scalar found under ``field``, in first-seen order."""
    seen: set[str] = set()
    for record in records:
        for value in _scalars(_field_value(record, field)):
            if value not in seen:
                seen.add(value)
                yield value


def _field_value(record: Mapping[str, Any], field: str) -> Any:
    if field in record or "." not in field:
        return record.get(field)
    name, subfield = field.split(".", 1)
    entries = record.get(name)
    if isinstance(entries, Mapping):
        entries = [entries]
    if not isinstance(entries, (list, tuple)):
        return None
    return [entry.get(subfield) for entry in entries if isinstance(entry, Mapping)]


def _scalars(value: Any) -> Iterator[str]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for item in value.values():
            yield from _scalars(item)
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from _scalars(item)
    else:
        yield str(value)


def _parse_id(value: str | list[str] | None) -> int | None:
    if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
        return None
    return int(value)
