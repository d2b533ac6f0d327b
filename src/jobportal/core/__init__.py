"""Core portal components: store, filter engine, URI templates, matching."""

from __future__ import annotations

from .filters import JOB_FIELDS, PROFILE_FIELDS, FieldKind, filter_records
from .matching import MatchConfig, RandomMatcher
from .store import EntityCollection, EntityStore, build_store
from .uri_template import MalformedTemplateError, UriTemplate

__all__ = [
    "EntityCollection",
    "EntityStore",
    "FieldKind",
    "JOB_FIELDS",
    "MalformedTemplateError",
    "MatchConfig",
    "PROFILE_FIELDS",
    "RandomMatcher",
    "UriTemplate",
    "build_store",
    "filter_records",
]
