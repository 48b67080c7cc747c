"""
Tool Catalog

Read-only lookup tables for tools and tool types. Constructed once from
reference data and passed to the agreement builder.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from ..exceptions import CatalogValidationError, InvalidToolCode, UnknownToolTypeError
from ..models import Tool, ToolType


def validate_reference_integrity(
    tools: Iterable[Tool],
    tool_types: Iterable[ToolType],
    source: Optional[str] = None,
) -> None:
    """
    Validate internal references are consistent.

    Catches:
    - Duplicate tool codes
    - Duplicate tool type names
    - Tools referencing non-existent tool types

    Raises:
        CatalogValidationError: If reference integrity errors are found
    """
    errors = []

    seen_type_names: set[str] = set()
    for tool_type in tool_types:
        if tool_type.name in seen_type_names:
            errors.append(f"Duplicate tool type: '{tool_type.name}'")
        seen_type_names.add(tool_type.name)

    seen_codes: set[str] = set()
    for tool in tools:
        if tool.code in seen_codes:
            errors.append(f"Duplicate tool code: '{tool.code}'")
        seen_codes.add(tool.code)
        if tool.type_name not in seen_type_names:
            errors.append(
                f"Tool '{tool.code}' references non-existent tool type '{tool.type_name}'"
            )

    if errors:
        raise CatalogValidationError(
            message="Reference integrity errors:\n" + "\n".join(f"  - {e}" for e in errors),
            details={"errors": errors},
            source=source,
        )


class ToolCatalog:
    """
    Tools keyed by code and tool types keyed by name.

    Usage:
        catalog = ToolCatalog(tools=[...], tool_types=[...])
        tool = catalog.lookup_tool("LADW")
        tool_type = catalog.lookup_tool_type(tool.type_name)
    """

    def __init__(
        self,
        tools: Iterable[Tool],
        tool_types: Iterable[ToolType],
        source: Optional[str] = None,
    ) -> None:
        tools = list(tools)
        tool_types = list(tool_types)
        validate_reference_integrity(tools, tool_types, source=source)

        self._tools: Mapping[str, Tool] = MappingProxyType({t.code: t for t in tools})
        self._tool_types: Mapping[str, ToolType] = MappingProxyType(
            {t.name: t for t in tool_types}
        )
        self.source = source

    # ── lookups ──────────────────────────────────────────────────────────

    def lookup_tool(self, code: str) -> Optional[Tool]:
        return self._tools.get(code)

    def lookup_tool_type(self, name: str) -> Optional[ToolType]:
        return self._tool_types.get(name)

    def get_tool(self, code: str) -> Tool:
        """
        Get a tool by code.

        Raises:
            InvalidToolCode: If no tool has this code
        """
        tool = self.lookup_tool(code)
        if tool is None:
            raise InvalidToolCode(message=f"There is no tool with tool code: {code}")
        return tool

    def get_tool_type(self, name: str) -> ToolType:
        """
        Get a tool type by name.

        Raises:
            UnknownToolTypeError: If the type is not defined
        """
        tool_type = self.lookup_tool_type(name)
        if tool_type is None:
            raise UnknownToolTypeError(
                message=f"Tool type '{name}' is not defined",
                source=self.source,
                key=name,
            )
        return tool_type

    def tool_type_for(self, tool: Tool) -> ToolType:
        """Get the tool type that prices a tool."""
        return self.get_tool_type(tool.type_name)

    def tools(self) -> tuple[Tool, ...]:
        return tuple(self._tools[code] for code in sorted(self._tools))

    def tool_types(self) -> tuple[ToolType, ...]:
        return tuple(self._tool_types[name] for name in sorted(self._tool_types))

    # ── container protocol ───────────────────────────────────────────────

    def __contains__(self, code: object) -> bool:
        return code in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def __iter__(self) -> Iterator[Tool]:
        return iter(self.tools())

    def __repr__(self) -> str:
        return (
            f"ToolCatalog(tools={len(self._tools)}, "
            f"tool_types={len(self._tool_types)}, "
            f"source={self.source!r})"
        )
