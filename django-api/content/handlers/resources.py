"""Per-request async resources.

A resource moves Idle -> Loading -> Success | Failure. Page views declare the
sources they depend on; independent sources are fetched concurrently and each
completion is settled on its own, so one failing source never hides the
others.
"""

import logging
from collections.abc import Callable, Mapping
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from content.domain.errors import DomainError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResourceState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class Resource(Generic[T]):
    """State of one data source for the current request."""

    name: str
    state: ResourceState = ResourceState.IDLE
    data: T | None = None
    error: str | None = None

    def start(self) -> None:
        self._require(ResourceState.IDLE)
        self.state = ResourceState.LOADING

    def succeed(self, data: T) -> None:
        self._require(ResourceState.LOADING)
        self.state = ResourceState.SUCCESS
        self.data = data
        self.error = None

    def fail(self, message: str, fallback: T) -> None:
        self._require(ResourceState.LOADING)
        self.state = ResourceState.FAILURE
        self.data = fallback
        self.error = message

    @property
    def loading(self) -> bool:
        return self.state is ResourceState.LOADING

    @property
    def failed(self) -> bool:
        return self.state is ResourceState.FAILURE

    def _require(self, expected: ResourceState) -> None:
        if self.state is not expected:
            raise RuntimeError(
                f"Resource {self.name!r} is {self.state.value}, expected {expected.value}"
            )


@dataclass(frozen=True)
class ResourceSpec(Generic[T]):
    """How to fetch a source and what to show if fetching fails."""

    fetch: Callable[[], T]
    error_message: str
    fallback: T


def _settle(resource: Resource[Any], spec: ResourceSpec[Any], future: Future) -> None:
    try:
        data = future.result()
    except DomainError as exc:
        logger.error("Error fetching %s: %s", resource.name, exc)
        resource.fail(spec.error_message, spec.fallback)
        return
    resource.succeed(data)


def load_resources(specs: Mapping[str, ResourceSpec[Any]]) -> dict[str, Resource[Any]]:
    """Fetch every source concurrently and return their settled resources."""
    resources: dict[str, Resource[Any]] = {name: Resource(name=name) for name in specs}
    if not specs:
        return resources

    with ThreadPoolExecutor(max_workers=len(specs), thread_name_prefix="content-fetch") as executor:
        futures: dict[Future, str] = {}
        for name, spec in specs.items():
            resources[name].start()
            futures[executor.submit(spec.fetch)] = name
        for future in as_completed(futures):
            name = futures[future]
            _settle(resources[name], specs[name], future)
    return resources


def load_resource(name: str, spec: ResourceSpec[T]) -> Resource[T]:
    return load_resources({name: spec})[name]
