import configparser

from samlsp.mappers.service_provider_config_mapper import (
    map_service_provider_settings_to_config,
)
from samlsp.misc.saml_utils import DEFAULT_TEMPLATES_PATH
from samlsp.misc.utils import json_from_file
from samlsp.models.service_provider_config import ServiceProviderConfig

_PATH = "samlsp.conf"
_CONFIG = None


# pylint:disable=global-statement
def get_config(path=None) -> configparser.ConfigParser:
    """
    Use this method only when it's not possible to inject config variables
    """
    global _CONFIG
    global _PATH
    if path is None:
        path = _PATH
    if _CONFIG is None or _PATH != path:
        _PATH = path
        _CONFIG = configparser.ConfigParser()
        _CONFIG.read(_PATH)
    return _CONFIG


def get_service_provider_config(
    config: configparser.ConfigParser,
) -> ServiceProviderConfig:
    settings = json_from_file(config.get("saml", "sp_settings_path"))
    return map_service_provider_settings_to_config(settings.get("sp", settings))


def get_templates_path(config: configparser.ConfigParser) -> str:
    return config.get("saml", "templates_path", fallback=DEFAULT_TEMPLATES_PATH)
