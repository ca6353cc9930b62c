# pylint: disable=c-extension-no-member
from lxml import etree

from samlsp.misc.saml_utils import compute_keyname, has_valid_signature, parse_xml
from samlsp.models.saml.constants import NAMESPACES
from samlsp.services.saml.authn_request_factory import create_default_authn_request
from samlsp.services.saml.authn_request_signer import AuthnRequestSigner


def test_sign_authn_request(sp_config, sp_certificate):
    cert_pem, key_pem = sp_certificate
    authn_request = create_default_authn_request(sp_config)

    root = AuthnRequestSigner(key_pem, cert_pem).sign(authn_request)

    signature = root.find("ds:Signature", NAMESPACES)
    assert signature is not None
    assert root.index(signature) == 1
    assert (
        signature.find(".//ds:Reference", NAMESPACES).attrib["URI"]
        == f"#{authn_request.id}"
    )
    assert signature.find(".//ds:KeyName", NAMESPACES).text == compute_keyname(
        cert_pem
    )
    assert signature.find(".//ds:X509Certificate", NAMESPACES).text
    assert has_valid_signature(root, cert_pem)


def test_signature_survives_serialization(sp_config, sp_certificate):
    cert_pem, key_pem = sp_certificate
    root = AuthnRequestSigner(key_pem, cert_pem).sign(
        create_default_authn_request(sp_config)
    )

    assert has_valid_signature(parse_xml(etree.tostring(root)), cert_pem)


def test_tampered_request_has_invalid_signature(sp_config, sp_certificate):
    cert_pem, key_pem = sp_certificate
    root = AuthnRequestSigner(key_pem, cert_pem).sign(
        create_default_authn_request(sp_config)
    )

    root.find("saml:Issuer", NAMESPACES).text = "https://evil.example/"

    assert not has_valid_signature(root, cert_pem)


def test_unsigned_request_has_no_valid_signature(sp_config, sp_certificate):
    cert_pem, _ = sp_certificate

    assert not has_valid_signature(
        create_default_authn_request(sp_config).root, cert_pem
    )
