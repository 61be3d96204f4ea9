"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - for web server contexts
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, TypeVar

from .config import AppConfig, get_config

T = TypeVar("T")


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        validator = container.resolve(JourneyValidatorService)

        # Testing
        container = Container.create_default()
        container.register(GeocoderPort, lambda: FakeGeocoder())
        resolver = container.resolve(LocationResolverService)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Registering a type again replaces its factory and drops any
        instance already built from the old one.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            self._singletons.pop(port_type, None)
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)

    def resolve(self, port_type: type[T]) -> T:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_singletons(self) -> None:
        """Clear all cached singletons.

        Call this in tests to ensure fresh instances.
        """
        with self._lock:
            self._singletons.clear()

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The Claude generator is bound only when an API key is configured;
        the travel planner then uses the mock generator on its own.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.
        """
        from .adapters.geocoding import GeoNamesGeocoderAdapter, OfflineGeocoderAdapter
        from .adapters.llm import ClaudeRecommendationAdapter, MockRecommendationAdapter
        from .adapters.rendering import FoliumJourneyRenderer
        from .adapters.sessions import InMemorySessionStore
        from .ports.geocoding import GeocoderPort
        from .ports.recommendations import RecommendationGeneratorPort
        from .ports.rendering import MapRendererPort
        from .ports.sessions import SessionStorePort
        from .services import (
            JourneyValidatorService,
            LocationResolverService,
            TravelPlannerService,
        )

        config = config or get_config()
        container = cls(config=config)

        # Geocoding
        def create_geocoder() -> GeocoderPort:
            if config.geocoding.enabled:
                return GeoNamesGeocoderAdapter(config.geocoding)
            return OfflineGeocoderAdapter()

        container.register(GeocoderPort, create_geocoder)

        # Validation
        container.register(
            LocationResolverService,
            lambda: LocationResolverService(
                geocoder=container.resolve(GeocoderPort),
                max_candidates=config.geocoding.max_rows,
            ),
        )
        container.register(
            JourneyValidatorService,
            lambda: JourneyValidatorService(
                resolver=container.resolve(LocationResolverService),
                report_all_failures=config.validation.report_all_failures,
            ),
        )

        # Recommendations
        container.register(
            MockRecommendationAdapter,
            lambda: MockRecommendationAdapter(config.mock),
        )
        if config.llm.is_configured:
            container.register(
                RecommendationGeneratorPort,
                lambda: ClaudeRecommendationAdapter(config.llm),
            )

        # Sessions and rendering
        container.register(SessionStorePort, lambda: InMemorySessionStore())
        container.register(MapRendererPort, lambda: FoliumJourneyRenderer())

        # Main service
        def create_travel_planner() -> TravelPlannerService:
            primary = (
                container.resolve(RecommendationGeneratorPort)
                if container.is_registered(RecommendationGeneratorPort)
                else None
            )
            return TravelPlannerService(
                fallback=container.resolve(MockRecommendationAdapter),
                sessions=container.resolve(SessionStorePort),
                primary=primary,
            )

        container.register(TravelPlannerService, create_travel_planner)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container (creates one if needed)."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
