"""Dependency injection container for the job portal."""

from __future__ import annotations

from dependency_injector import containers, providers

from .core.matching import MatchConfig, RandomMatcher
from .core.store import build_store
from .pipeline import BatchRunner
from .server import build_server


class PortalContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration(
        default={"store": {"seed": "default", "id_policy": "max_plus_one"}},
    )

    store = providers.Singleton(
        build_store,
        seed=config.store.seed,
        id_policy=config.store.id_policy,
    )

    matcher = providers.Singleton(RandomMatcher)

    server = providers.Singleton(
        build_server,
        store=store,
        matcher=matcher,
    )

    batch_runner = providers.Factory(
        BatchRunner,
        server=server,
    )


def create_container(*, settings: dict | None = None) -> PortalContainer:
    """Instantiate container with optional overrides."""

    container = PortalContainer()

    if not settings:
        return container

    store_settings = settings.get("store", {}) if isinstance(settings, dict) else {}
    if store_settings:
        container.config.from_dict({"store": store_settings})

    match_settings = settings.get("match", {}) if isinstance(settings, dict) else {}
    if match_settings:
        match_config = MatchConfig(**match_settings)
        container.matcher.override(providers.Singleton(RandomMatcher, config=match_config))

    return container
