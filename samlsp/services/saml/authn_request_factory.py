import logging
from typing import Dict, Union
from urllib.parse import urljoin, urlparse

from samlsp.exceptions.saml_exceptions import ServiceProviderNotSetException
from samlsp.models.enums import (
    AuthenticationContextComparison,
    AuthnContextComparisonType,
    AuthnContextType,
    BindingType,
)
from samlsp.models.saml.authn_request import AuthnRequest
from samlsp.models.saml.conditions import AudienceRestriction
from samlsp.models.saml.constants import NameIdFormat, ProtocolBinding
from samlsp.models.saml.name_id_policy import NameIDPolicy
from samlsp.models.saml.requested_authn_context import RequestedAuthnContext
from samlsp.models.service_provider_config import (
    AuthenticationContexts,
    NameIdFormats,
    ServiceProviderConfig,
)

log = logging.getLogger(__name__)

PROTOCOL_BINDINGS: Dict[BindingType, str] = {
    BindingType.ARTIFACT: ProtocolBinding.HTTP_ARTIFACT,
    BindingType.POST: ProtocolBinding.HTTP_POST,
    BindingType.REDIRECT: ProtocolBinding.HTTP_REDIRECT,
    BindingType.SOAP: ProtocolBinding.SOAP,
}

COMPARISON_TYPES: Dict[AuthenticationContextComparison, AuthnContextComparisonType] = {
    AuthenticationContextComparison.BETTER: AuthnContextComparisonType.BETTER,
    AuthenticationContextComparison.MINIMUM: AuthnContextComparisonType.MINIMUM,
    AuthenticationContextComparison.MAXIMUM: AuthnContextComparisonType.MAXIMUM,
    AuthenticationContextComparison.EXACT: AuthnContextComparisonType.EXACT,
}


def resolve_url(server: str, local_path: str) -> str:
    parsed_server = urlparse(server)
    if not parsed_server.scheme or not parsed_server.netloc:
        raise ValueError(f"Invalid base url for service provider: {server!r}")
    return urljoin(server, local_path)


class AuthnRequestFactory:
    """
    Creates AuthnRequests with the defaults derived from the service provider
    configuration. The configuration is only read, never modified.
    """

    def __init__(self, sp_config: Union[ServiceProviderConfig, None]) -> None:
        self._sp_config = sp_config

    def create_default(self) -> AuthnRequest:
        sp_config = self._sp_config
        if sp_config is None or not sp_config.entity_id:
            log.error("Unable to create AuthnRequest, no service provider entity id")
            raise ServiceProviderNotSetException()

        authn_request = AuthnRequest()
        authn_request.issuer = sp_config.entity_id

        binding = sp_config.sign_on_endpoint.binding
        if binding != BindingType.NOT_SET:
            authn_request.assertion_consumer_service_url = resolve_url(
                sp_config.server, sp_config.sign_on_endpoint.local_path
            )
        authn_request.protocol_binding = PROTOCOL_BINDINGS.get(binding)

        authn_request.name_id_policy = self._create_name_id_policy(
            sp_config.name_id_formats, sp_config.entity_id
        )
        authn_request.requested_authn_context = self._create_requested_authn_context(
            sp_config.authentication_contexts
        )

        authn_request.provider_name = sp_config.provider_name
        authn_request.attribute_consuming_service_index = (
            sp_config.attribute_consuming_service_index
        )
        authn_request.force_authn = sp_config.force_authn
        authn_request.is_passive = sp_config.is_passive

        authn_request.set_conditions(
            [AudienceRestriction(audiences=[sp_config.entity_id])]
        )

        log.debug(
            "Created AuthnRequest %s for service provider %s",
            authn_request.id,
            sp_config.entity_id,
        )
        return authn_request

    @staticmethod
    def _create_name_id_policy(
        name_id_formats: NameIdFormats, entity_id: str
    ) -> Union[NameIDPolicy, None]:
        if len(name_id_formats.formats) == 0:
            return None

        name_id_policy = NameIDPolicy(
            allow_create=name_id_formats.allow_create,
            format=name_id_formats.formats[0].format,
        )
        if name_id_policy.format != NameIdFormat.ENTITY:
            name_id_policy.sp_name_qualifier = entity_id
        return name_id_policy

    @staticmethod
    def _create_requested_authn_context(
        authentication_contexts: AuthenticationContexts,
    ) -> Union[RequestedAuthnContext, None]:
        if len(authentication_contexts.contexts) == 0:
            return None

        requested_authn_context = RequestedAuthnContext(
            comparison=COMPARISON_TYPES.get(authentication_contexts.comparison)
        )
        for authentication_context in authentication_contexts.contexts:
            if (
                authentication_context.reference_type
                == AuthnContextType.AUTHN_CONTEXT_DECL_REF.value
            ):
                kind = AuthnContextType.AUTHN_CONTEXT_DECL_REF
            else:
                kind = AuthnContextType.AUTHN_CONTEXT_CLASS_REF
            requested_authn_context.add_reference(authentication_context.context, kind)
        return requested_authn_context


def create_default_authn_request(
    sp_config: Union[ServiceProviderConfig, None],
) -> AuthnRequest:
    return AuthnRequestFactory(sp_config).create_default()
