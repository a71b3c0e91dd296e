"""Infrastructure provider configs — lives in L4, not domain."""

from __future__ import annotations

from pydantic import BaseModel, Field

from office_template_sync import __version__


class HttpProviderConfig(BaseModel):
    timeout: float = 30.0
    user_agent: str = f'office-template-sync/{__version__}'


class OfficeConfig(BaseModel):
    version: str = '16.0'
    documents_fallback: bool = True  # False → unresolved kinds fail instead of using Documents


class InfraConfig(BaseModel):
    """Groups transport and host-integration settings outside the domain layer."""

    http: HttpProviderConfig = Field(default_factory=HttpProviderConfig)
    office: OfficeConfig = Field(default_factory=OfficeConfig)
