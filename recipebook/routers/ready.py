from fastapi import APIRouter

from ..services.units import MEASUREMENT_UNITS

router = APIRouter()


@router.get("/ready")
def ready():
    return {"ok": True, "units": len(MEASUREMENT_UNITS)}
