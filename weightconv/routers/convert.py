"""
Router for weight conversion.
"""

import logging
from fastapi import APIRouter, HTTPException, Request

from ..ratelimit import limiter, convert_limit
from ..schemas import ConversionRequest, ConversionResponse, ConversionErrorDetail
from ..services.conversion import ConversionError, UnrecognizedUnit, execute
from ..settings import settings

router = APIRouter()
logger = logging.getLogger("weightconv.convert")


def _error_detail(exc: ConversionError) -> dict:
    token = None
    if isinstance(exc, UnrecognizedUnit) and exc.token is not None:
        token = str(exc.token)
    return ConversionErrorDetail(error=exc.code, message=str(exc), token=token).model_dump(exclude_none=True)


@router.post("/convert", response_model=ConversionResponse)
@limiter.limit(convert_limit)
def convert_weight(request: Request, req: ConversionRequest):  # request is required by the limiter
    """
    Convert a quantity from one weight unit to another.
    """
    try:
        result = execute(req)
    except ConversionError as e:
        logger.warning(f"Rejected conversion {req.from_unit!r} -> {req.to_unit!r}: {e}")
        raise HTTPException(status_code=400, detail=_error_detail(e))

    # Display rounding only; request value wins over the configured default
    precision = req.precision if req.precision is not None else settings.result_precision
    value = result.value
    if precision is not None:
        value = round(value, precision)

    return ConversionResponse(result=value)
