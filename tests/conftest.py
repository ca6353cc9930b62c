import pytest

from samlsp.dependency_injection.config import get_config
from samlsp.models.enums import BindingType
from samlsp.models.saml.constants import NameIdFormat
from samlsp.models.service_provider_config import (
    NameIdFormatElement,
    NameIdFormats,
    ServiceProviderConfig,
    SignOnEndpoint,
)
from tests.utils import make_test_certificate


@pytest.fixture
def config():
    yield get_config("tests/samlsp.test.conf")


@pytest.fixture
def sp_config() -> ServiceProviderConfig:
    return ServiceProviderConfig(
        entity_id="https://sp.example/",
        server="https://sp.example/",
        sign_on_endpoint=SignOnEndpoint(binding=BindingType.POST, local_path="/acs"),
        name_id_formats=NameIdFormats(
            allow_create=True,
            formats=[NameIdFormatElement(format=NameIdFormat.TRANSIENT)],
        ),
    )


@pytest.fixture(scope="session")
def sp_certificate():
    return make_test_certificate()
