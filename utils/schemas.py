"""
Portfolio record schema, checked at the JSON boundary.

Field names follow the JSON keys the clients send. Unknown keys are kept so
a stored record is exactly what was submitted.
"""
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, ValidationError


class SchemaModel(BaseModel):
    model_config = ConfigDict(extra='allow')


class PersonalInfo(SchemaModel):
    fullName: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None


class ExperienceEntry(SchemaModel):
    title: Optional[str] = None
    company: Optional[str] = None
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    description: Optional[str] = None


class EducationEntry(SchemaModel):
    degree: Optional[str] = None
    institution: Optional[str] = None
    year: Optional[Union[int, str]] = None


class CertificateReference(SchemaModel):
    name: Optional[str] = None
    url: Optional[str] = None
    filename: Optional[str] = None


class ProjectEntry(SchemaModel):
    name: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None


class PortfolioPayload(SchemaModel):
    """Body of a create-or-update request, without its id"""
    personalInfo: Optional[PersonalInfo] = None
    summary: Optional[str] = None
    experience: Optional[List[ExperienceEntry]] = None
    education: Optional[List[EducationEntry]] = None
    skills: Optional[List[str]] = None
    certificates: Optional[List[CertificateReference]] = None
    projects: Optional[List[ProjectEntry]] = None


class PayloadError(ValueError):
    """Raised when a submitted record does not match the schema"""


def validate_portfolio(data: Any) -> Dict[str, Any]:
    """Check a submitted record, returning it unchanged when it is valid"""
    if not isinstance(data, dict):
        raise PayloadError('Portfolio must be a JSON object')
    try:
        PortfolioPayload.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = '.'.join(str(part) for part in first['loc'])
        raise PayloadError(f"Invalid portfolio field '{location}': {first['msg']}") from e
    return data
