from typing import Any, Dict, List, Union

from samlsp.models.enums import AuthenticationContextComparison, BindingType
from samlsp.models.service_provider_config import (
    AuthenticationContext,
    AuthenticationContexts,
    NameIdFormatElement,
    NameIdFormats,
    ServiceProviderConfig,
    SignOnEndpoint,
)


def map_service_provider_settings_to_config(
    raw_settings: Dict[str, Any],
) -> ServiceProviderConfig:
    """
    Map the sp section of a settings.json to a ServiceProviderConfig.

    sample settings:
        {
            "entityId": "https://sp.example/",
            "server": "https://sp.example/",
            "signOnEndpoint": {"binding": "post", "localPath": "/acs"},
            "nameIdFormats": {
                "allowCreate": true,
                "formats": ["urn:oasis:names:tc:SAML:2.0:nameid-format:transient"]
            },
            "authenticationContexts": {
                "comparison": "minimum",
                "contexts": [
                    {"context": "urn:...:PasswordProtectedTransport"},
                    {"context": "urn:...:decl", "referenceType": "AuthnContextDeclRef"}
                ]
            }
        }
    """
    return ServiceProviderConfig(
        entity_id=get_optional_string_from_dict(raw_settings, "entityId"),
        server=get_optional_string_from_dict(raw_settings, "server") or "",
        sign_on_endpoint=map_sign_on_endpoint(
            get_optional_dict_from_dict(raw_settings, "signOnEndpoint")
        ),
        name_id_formats=map_name_id_formats(
            get_optional_dict_from_dict(raw_settings, "nameIdFormats")
        ),
        authentication_contexts=map_authentication_contexts(
            get_optional_dict_from_dict(raw_settings, "authenticationContexts")
        ),
        provider_name=get_optional_string_from_dict(raw_settings, "providerName"),
        attribute_consuming_service_index=get_optional_int_from_dict(
            raw_settings, "attributeConsumingServiceIndex"
        ),
        force_authn=get_optional_boolean_from_dict(raw_settings, "forceAuthn"),
        is_passive=get_optional_boolean_from_dict(raw_settings, "isPassive"),
    )


def map_sign_on_endpoint(raw_endpoint: Dict[str, Any]) -> SignOnEndpoint:
    raw_binding = get_optional_string_from_dict(raw_endpoint, "binding")
    return SignOnEndpoint(
        binding=(
            BindingType.NOT_SET
            if raw_binding is None
            else BindingType(raw_binding.lower())
        ),
        local_path=get_optional_string_from_dict(raw_endpoint, "localPath") or "",
    )


def map_name_id_formats(raw_formats: Dict[str, Any]) -> NameIdFormats:
    return NameIdFormats(
        allow_create=get_optional_boolean_from_dict(raw_formats, "allowCreate")
        is True,
        formats=[
            NameIdFormatElement(format=name_id_format)
            for name_id_format in get_string_list_from_dict(raw_formats, "formats")
        ],
    )


def map_authentication_contexts(raw_contexts: Dict[str, Any]) -> AuthenticationContexts:
    raw_comparison = get_optional_string_from_dict(raw_contexts, "comparison")
    contexts: List[AuthenticationContext] = []
    for raw_context in get_optional_list_from_dict(raw_contexts, "contexts"):
        if not isinstance(raw_context, dict):
            raise ValueError(
                f"Authentication context is not an object: {raw_context}"
            )
        contexts.append(
            AuthenticationContext(
                context=get_string_from_dict(raw_context, "context"),
                reference_type=get_optional_string_from_dict(
                    raw_context, "referenceType"
                ),
            )
        )

    return AuthenticationContexts(
        comparison=(
            AuthenticationContextComparison.NOT_SET
            if raw_comparison is None
            else AuthenticationContextComparison(raw_comparison.lower())
        ),
        contexts=contexts,
    )


def get_optional_dict_from_dict(raw: Dict[str, Any], key: str) -> Dict[str, Any]:
    if key not in raw or raw[key] is None:
        return {}

    value = raw[key]
    if not isinstance(value, dict):
        raise ValueError(f"Value of {key} is not an object in settings: {raw}")

    return value


def get_optional_string_from_dict(raw: Dict[str, Any], key: str) -> Union[str, None]:
    if key not in raw or raw[key] is None:
        return None

    value = raw[key]
    if not isinstance(value, str):
        raise ValueError(f"Value of {key} is not a string in settings: {raw}")

    return value


def get_string_from_dict(raw: Dict[str, Any], key: str) -> str:
    if key not in raw:
        raise ValueError(f"Key {key} not found in settings: {raw}")

    value = get_optional_string_from_dict(raw, key)
    if value is None:
        raise ValueError(f"Value of {key} is not a string in settings: {raw}")

    return value


def get_optional_list_from_dict(raw: Dict[str, Any], key: str) -> List[Any]:
    if key not in raw or raw[key] is None:
        return []

    value = raw[key]
    if not isinstance(value, list):
        raise ValueError(f"Value of {key} is not a list in settings: {raw}")

    return value


def get_string_list_from_dict(raw: Dict[str, Any], key: str) -> List[str]:
    value = get_optional_list_from_dict(raw, key)
    if not all(isinstance(v, str) for v in value):
        raise ValueError(f"Value of {key} is not a list of strings in settings: {raw}")

    return value


def get_optional_boolean_from_dict(
    raw: Dict[str, Any], key: str
) -> Union[bool, None]:
    if key not in raw or raw[key] is None:
        return None

    value = raw[key]
    if not isinstance(value, bool):
        raise ValueError(f"Value of {key} is not a boolean in settings: {raw}")

    return value


def get_optional_int_from_dict(raw: Dict[str, Any], key: str) -> Union[int, None]:
    if key not in raw or raw[key] is None:
        return None

    value = raw[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Value of {key} is not an integer in settings: {raw}")

    return value
