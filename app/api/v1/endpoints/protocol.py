"""
Protocol endpoints: the series catalog and the serve strip rule.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_current_role
from app.precision.protocol import (
    CATEGORY_LABELS,
    CATEGORY_TARGETS,
    PROTOCOL,
    STRIPS,
    TOTAL_SERIES,
    TOTAL_SHOTS,
    WIZARD_STEPS,
    allowed_strips,
    is_strip_allowed,
)
from app.schemas.protocol import ProtocolResponse, StripCheckRequest, StripCheckResponse

router = APIRouter(dependencies=[Depends(get_current_role)])


@router.get("", summary="Get the full test protocol.", response_model=ProtocolResponse)
def get_protocol():
    return ProtocolResponse(series=PROTOCOL, strips=STRIPS, category_targets=CATEGORY_TARGETS,
                            category_labels=CATEGORY_LABELS, wizard_steps=WIZARD_STEPS, total_series=TOTAL_SERIES,
                            total_shots=TOTAL_SHOTS, )


@router.post("/strips/check", summary="Check whether a serve strip may be chosen next.",
             response_model=StripCheckResponse, )
def check_strip(data: StripCheckRequest):
    return StripCheckResponse(allowed=is_strip_allowed(data.previous, data.proposed),
                              allowed_strips=allowed_strips(data.previous), )
