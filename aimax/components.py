"""Component registry.

Each component maps a directory of the bundled source tree onto a directory
inside the Claude configuration directory. The registry is fixed for the
lifetime of the process.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from aimax.exceptions import UnknownComponentError


@dataclass(frozen=True)
class Component:
    """An installable unit of content.

    Attributes:
        key: Unique identifier (e.g., "agents")
        name: Human-readable label
        source: Path relative to the source root
        target: Path relative to the Claude directory (e.g., "commands/aimax")
        pattern: Descriptive file filter; only the ``.md`` suffix is enforced
            for non-recursive components
        recursive: True to copy the whole subtree without suffix filtering
        exclusive: True when the target directory belongs solely to aimax and
            may be removed wholesale
    """

    key: str
    name: str
    source: str
    target: str
    pattern: str
    recursive: bool = False
    exclusive: bool = False


_COMPONENTS: dict[str, Component] = {
    "agents": Component(
        key="agents",
        name="Agents",
        source="agents",
        target="agents",
        pattern="*.md",
    ),
    "rules": Component(
        key="rules",
        name="Rules",
        source="rules",
        target="rules",
        pattern="*.md",
    ),
    "commands": Component(
        key="commands",
        name="aimax slash commands",
        source="commands",
        target="commands/aimax",
        pattern="*.md",
        exclusive=True,
    ),
    "skills": Component(
        key="skills",
        name="Skills",
        source="skills",
        target="skills",
        pattern="**/*",
        recursive=True,
    ),
}

COMPONENTS: Mapping[str, Component] = MappingProxyType(_COMPONENTS)


def component_keys() -> list[str]:
    """Get all registered component keys in registry order."""
    return list(COMPONENTS)


def get_component(key: str) -> Component | None:
    """Look up a component by key.

    Args:
        key: Component key

    Returns:
        The Component, or None if the key is not registered
    """
    return COMPONENTS.get(key)


def require_component(key: str) -> Component:
    """Look up a component by key, failing on unknown keys.

    Args:
        key: Component key

    Returns:
        The Component

    Raises:
        UnknownComponentError: If the key is not registered
    """
    component = get_component(key)
    if component is None:
        available = ", ".join(COMPONENTS)
        raise UnknownComponentError(
            f"Unknown component '{key}'. Available: {available}"
        )
    return component
