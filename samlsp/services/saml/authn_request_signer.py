# pylint: disable=c-extension-no-member
import logging

import xmlsec
from lxml import etree

from samlsp.misc.saml_utils import compute_keyname
from samlsp.models.saml.authn_request import AuthnRequest
from samlsp.models.saml.constants import NAMESPACES

log = logging.getLogger(__name__)


class AuthnRequestSigner:
    def __init__(self, key_data: str, cert_data: str) -> None:
        """
        :param key_data: PEM encoded private key used for signing
        :param cert_data: PEM encoded certificate belonging to the key, added to the KeyInfo
        """
        self._key_data = key_data
        self._cert_data = cert_data
        self._keyname = compute_keyname(cert_data)

    def sign(self, authn_request: AuthnRequest) -> etree._Element:
        root = authn_request.root
        signature_node = self._add_signature_template(root, authn_request.id)

        key = xmlsec.Key.from_memory(self._key_data, xmlsec.constants.KeyDataFormatPem)
        key.load_cert_from_memory(
            self._cert_data, xmlsec.constants.KeyDataFormatCertPem
        )
        ctx = xmlsec.SignatureContext()
        ctx.key = key
        ctx.register_id(root)
        ctx.sign(signature_node)

        log.debug("Signed AuthnRequest %s with key %s", authn_request.id, self._keyname)
        return root

    def _add_signature_template(self, root, id_hash: str):
        signature_node = xmlsec.template.create(
            root,
            xmlsec.constants.TransformExclC14N,
            xmlsec.constants.TransformRsaSha256,
            ns="ds",
        )
        # ds:Signature directly follows saml:Issuer
        issuer_node = root.find("saml:Issuer", NAMESPACES)
        if issuer_node is None:
            raise ValueError("Issuer node not found, cannot place signature element.")
        issuer_node.addnext(signature_node)

        reference_node = xmlsec.template.add_reference(
            signature_node, xmlsec.constants.TransformSha256, uri=f"#{id_hash}"
        )
        xmlsec.template.add_transform(reference_node, xmlsec.constants.TransformEnveloped)
        xmlsec.template.add_transform(reference_node, xmlsec.constants.TransformExclC14N)

        key_info = xmlsec.template.ensure_key_info(signature_node)
        xmlsec.template.add_key_name(key_info, self._keyname)
        x509_data = xmlsec.template.add_x509_data(key_info)
        xmlsec.template.x509_data_add_certificate(x509_data)
        return signature_node
