from pydantic import BaseModel
from typing import Any, Optional, List, Union


class EstimateRequest(BaseModel):
    # Everything stays loose here. The engine does the type, positive and
    # finite checks so form strings, API numbers, booleans and nulls all get
    # the same treatment and the same error envelope.
    project_type: Any = None
    length: Any = None
    width: Any = None
    height: Any = None


class MaterialQuantityOut(BaseModel):
    label: str
    value: Union[int, float]
    unit: str
    display: str
    formatted: str


class EstimateResponse(BaseModel):
    project_type: str
    materials: List[MaterialQuantityOut] = []
    number_locale: str
    message: str


class ErrorDetail(BaseModel):
    message: str
    error: str
    field: Optional[str] = None


class ProjectTypeOut(BaseModel):
    value: str
    label: str
    aliases: List[str] = []


class CompanyInfo(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    number_locale: str
