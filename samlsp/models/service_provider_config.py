from typing import List, Union

from pydantic import BaseModel, Field

from samlsp.models.enums import AuthenticationContextComparison, BindingType


class SignOnEndpoint(BaseModel):
    binding: BindingType = BindingType.NOT_SET
    local_path: str = ""


class NameIdFormatElement(BaseModel):
    format: str


class NameIdFormats(BaseModel):
    allow_create: bool = False
    formats: List[NameIdFormatElement] = []


class AuthenticationContext(BaseModel):
    context: str
    reference_type: Union[str, None] = None


class AuthenticationContexts(BaseModel):
    comparison: AuthenticationContextComparison = (
        AuthenticationContextComparison.NOT_SET
    )
    contexts: List[AuthenticationContext] = []


class ServiceProviderConfig(BaseModel):
    entity_id: Union[str, None] = None
    server: str = ""
    sign_on_endpoint: SignOnEndpoint = Field(default_factory=SignOnEndpoint)
    name_id_formats: NameIdFormats = Field(default_factory=NameIdFormats)
    authentication_contexts: AuthenticationContexts = Field(
        default_factory=AuthenticationContexts
    )
    provider_name: Union[str, None] = None
    attribute_consuming_service_index: Union[int, None] = None
    force_authn: Union[bool, None] = None
    is_passive: Union[bool, None] = None
