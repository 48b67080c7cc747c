"""Tool catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from ...catalog import ReferenceData
from ...models import Tool
from ..dependencies import get_reference_data
from ..schemas import ToolResponse

router = APIRouter(prefix="/tools", tags=["Tools"])


def _tool_response(tool: Tool, data: ReferenceData) -> ToolResponse:
    tool_type = data.catalog.tool_type_for(tool)
    return ToolResponse(
        code=tool.code,
        type=tool.type_name,
        brand=tool.brand,
        daily_charge=str(tool_type.daily_charge),
        weekday_chargeable=tool_type.weekday_chargeable,
        weekend_chargeable=tool_type.weekend_chargeable,
        holiday_chargeable=tool_type.holiday_chargeable,
    )


@router.get("", response_model=list[ToolResponse])
async def list_tools(data: ReferenceData = Depends(get_reference_data)):
    """List all rentable tools, sorted by code."""
    return [_tool_response(tool, data) for tool in data.catalog.tools()]


@router.get("/{code}", response_model=ToolResponse)
async def get_tool(code: str, data: ReferenceData = Depends(get_reference_data)):
    """Get one tool and its pricing."""
    tool = data.catalog.lookup_tool(code)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Tool '{code}' not found")
    return _tool_response(tool, data)
