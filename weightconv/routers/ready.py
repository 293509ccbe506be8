from fastapi import APIRouter

from ..schemas import ReadyResponse
from ..services.units import supported_tokens

router = APIRouter()


@router.get("/ready", response_model=ReadyResponse)
def ready():
    return ReadyResponse(ok=True, units=supported_tokens())
