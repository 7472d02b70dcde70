"""Title template API endpoints.

Backs a template editor: renders a template both plainly and in diagnostic
mode, and lists the namespaces a template can reference.
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from template_string import LexError, Segment
from terminal_title.config import get_default_template
from terminal_title.formatters import MappingFieldFormatter, TerminalContext, build_terminal_title

from .models import (
    NamespaceModel,
    NamespacesResponse,
    PreviewRequest,
    PreviewResponse,
    SegmentModel,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _segment_to_model(segment: Segment) -> SegmentModel:
    return SegmentModel(type=segment.type, **asdict(segment))


@router.post("/title/preview", response_model=PreviewResponse)
def preview_title(request: PreviewRequest):
    """Render a title template with the supplied terminal values."""
    template = request.template if request.template is not None else get_default_template()
    ctx = TerminalContext(
        title=request.title,
        current_directory=request.current_directory,
        rows=request.rows,
        columns=request.columns,
    )

    try:
        title = build_terminal_title(template, ctx)
    except LexError as e:
        logger.warning("[API] Rejected template: %s", e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail=str(e),
        ) from e

    return PreviewResponse(
        template=template,
        html=title.format_html(),
        diagnostic_html=title.format_diagnostic_html(),
        segments=[_segment_to_model(s) for s in title.segments],
    )


@router.get("/title/namespaces", response_model=NamespacesResponse)
def list_namespaces():
    """List the namespaces and fields available to title templates."""
    title = build_terminal_title(None)
    namespaces = []
    for name in title.namespaces():
        formatter = title.get_formatter(name)
        fields = formatter.describe() if isinstance(formatter, MappingFieldFormatter) else {}
        namespaces.append(NamespaceModel(name=name, fields=fields))
    return NamespacesResponse(namespaces=namespaces)
