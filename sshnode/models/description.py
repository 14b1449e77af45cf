"""Provider self-description for plugin hosts."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ProviderDescription:
    """Static metadata an orchestrator shows for this provider.

    ``properties_mapping`` maps short property names to fully-qualified
    configuration keys.
    """

    name: str
    title: str
    description: str
    properties: tuple[str, ...] = ()
    properties_mapping: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "properties_mapping", MappingProxyType(dict(self.properties_mapping))
        )
