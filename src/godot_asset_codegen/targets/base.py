"""Base renderer class for generated lookup modules.

This module defines the interface that turns a list of asset entries
into source code for a particular host language.
"""

import json
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.types import AssetEntry, Category


def string_literal(value: str) -> str:
    """Quote a string as a double-quoted literal.

    JSON escapes are valid in both Python and C# string literals.
    """
    return json.dumps(value)


class Renderer(ABC):
    """Abstract base class for render targets.

    A renderer emits, for one category, a closed identifier type with
    one member per entry and a total function from that type to the
    entry's resource path.
    """

    name: str = ""

    def legalize_identifier(self, identifier: str) -> str:
        """Adjust an identifier to the target language's rules.

        The default leaves identifiers unchanged.
        """
        return identifier

    @abstractmethod
    def module_filename(self, category: "Category") -> str:
        """Return the file name of the generated module for a category."""
        pass

    @abstractmethod
    def render(
        self,
        category: "Category",
        entries: Sequence["AssetEntry"],
        namespace: str,
    ) -> str:
        """Render the lookup module source.

        Args:
            category: Category the entries belong to
            entries: Entries in discovery order, identifiers already unique
            namespace: Module or namespace the generated code belongs to

        Returns:
            Complete source text, ending with a newline
        """
        pass
