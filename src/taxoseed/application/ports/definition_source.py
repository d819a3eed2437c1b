"""Definition source port - where raw catalog definitions come from."""

from typing import Any, Protocol


class DefinitionSource(Protocol):
    """Provides raw property definitions and per-vertical category lists."""

    def load_properties(self) -> list[dict[str, Any]]: ...

    def load_category_files(self) -> list[list[dict[str, Any]]]: ...
