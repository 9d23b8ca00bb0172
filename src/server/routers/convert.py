"""Convert endpoint for the API."""

from __future__ import annotations

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from md2slack.converter import collect_warnings, markdown_to_blocks, markdown_to_blocks_multiple
from md2slack.exceptions import OptionsError
from md2slack.schemas import blocks_to_dicts
from server.models import ConvertErrorResponse, ConvertRequest, ConvertSuccessResponse
from server.server_config import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)

router = APIRouter()

COMMON_CONVERT_RESPONSES: dict[int | str, dict] = {
    status.HTTP_200_OK: {"model": ConvertSuccessResponse, "description": "Successful conversion"},
    status.HTTP_400_BAD_REQUEST: {"model": ConvertErrorResponse, "description": "Invalid conversion options"},
}


@router.post("/api/convert", responses=COMMON_CONVERT_RESPONSES)
def api_convert(convert_request: ConvertRequest) -> JSONResponse:
    """Convert Markdown into Slack blocks.

    **Parameters**

    - **convert_request** (`ConvertRequest`): Markdown text, output mode and options

    **Returns**

    - **JSONResponse**: ``blocks`` (or ``groups`` when ``multiple`` is set) with an
      optional ``warnings`` list, or an error response with status 400

    """
    overrides = convert_request.options.overrides() if convert_request.options else {}
    try:
        options = DEFAULT_OPTIONS.merged(**overrides)
    except OptionsError as exc:
        logger.warning("Rejected conversion options", extra={"options": overrides, "error": str(exc)})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ConvertErrorResponse(error=str(exc)).model_dump(),
        )

    warnings: list[str] = []
    if convert_request.multiple:
        groups = markdown_to_blocks_multiple(convert_request.markdown, options)
        for group in groups:
            for warning in collect_warnings(group):
                if warning not in warnings:
                    warnings.append(warning)
        response = ConvertSuccessResponse(
            groups=[blocks_to_dicts(group) for group in groups],
            block_count=sum(len(group) for group in groups),
        )
    else:
        blocks = markdown_to_blocks(convert_request.markdown, options)
        warnings = collect_warnings(blocks)
        response = ConvertSuccessResponse(blocks=blocks_to_dicts(blocks), block_count=len(blocks))

    if convert_request.include_warnings and warnings:
        response.warnings = warnings

    return JSONResponse(status_code=status.HTTP_200_OK, content=response.model_dump(exclude_none=True))
