# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Pydantic request/response schemas."""
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class IncidentQuery(BaseModel):
    """Raw ``GET /incidents`` parameters; validated by the filter compiler."""
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    code: Optional[str] = None
    grid: Optional[str] = None
    neighborhood: Optional[str] = None
    limit: Optional[str] = None


class IncidentOut(BaseModel):
    case_number: Union[str, int]
    date: str
    time: str
    code: Optional[int]
    incident: Optional[str]
    police_grid: Optional[int]
    neighborhood_number: Optional[int]
    block: Optional[str]


class CodeOut(BaseModel):
    code: Optional[int]
    type: Optional[str]


class NeighborhoodOut(BaseModel):
    id: Optional[int]
    name: Optional[str]


class RemoveIncidentRequest(BaseModel):
    case_number: Union[str, int]


class NewIncidentRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    case_number: Optional[Union[str, int]] = None
