"""
Estimates API — the website's materials calculator form posts here.

GET  /api/estimates/project-types  — Selector options for the form
POST /api/estimates/               — Run the estimator, return ordered materials
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..config import settings
from ..calculators import EstimationResult, InvalidInput, UnknownProjectType, estimate
from ..calculators.registry import ProjectType, aliases_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/estimates", tags=["estimates"])

MSG_SUCCESS = "Cálculo completado exitosamente."
MSG_INVALID_INPUT = "Por favor, completa todos los campos correctamente."
MSG_UNKNOWN_TYPE = "Tipo de proyecto no válido."

PROJECT_TYPE_LABELS = {
    ProjectType.SLAB: "Losa",
    ProjectType.WALL: "Muro de block",
    ProjectType.FLOOR: "Firme",
    ProjectType.COLUMN: "Columna",
}


def error_detail(message: str, error, field: Optional[str] = None) -> dict:
    """The {message, error, field} envelope every 422 from this API carries."""
    return schemas.ErrorDetail(message=message, error=str(error), field=field).model_dump()


def _to_response(result: EstimationResult) -> schemas.EstimateResponse:
    return schemas.EstimateResponse(
        project_type=result.project_type,
        materials=[
            schemas.MaterialQuantityOut(
                label=item.label,
                value=item.value,
                unit=item.unit.value,
                display=item.display,
                formatted=item.formatted,
            )
            for item in result
        ],
        number_locale=settings.NUMBER_LOCALE,
        message=MSG_SUCCESS,
    )


@router.get("/project-types", response_model=List[schemas.ProjectTypeOut])
def list_project_types():
    return [
        schemas.ProjectTypeOut(
            value=project_type.value,
            label=PROJECT_TYPE_LABELS[project_type],
            aliases=aliases_for(project_type),
        )
        for project_type in ProjectType
    ]


@router.post("/", response_model=schemas.EstimateResponse)
def create_estimate(request: schemas.EstimateRequest):
    """
    Estimate materials for the submitted dimensions.

    Invalid dimensions and unknown project types both return 422 with the
    user-facing message plus the specific error.
    """
    try:
        result = estimate(request.project_type, request.length, request.width, request.height)
    except InvalidInput as e:
        logger.info("Rejected estimate input: %s", e)
        raise HTTPException(status_code=422, detail=error_detail(MSG_INVALID_INPUT, e, e.field))
    except UnknownProjectType as e:
        logger.info("Rejected project type: %s", e)
        raise HTTPException(status_code=422, detail=error_detail(MSG_UNKNOWN_TYPE, e, "project_type"))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Estimate for %s: %s", result.project_type, result.as_dict())
    return _to_response(result)
