# pylint: disable=c-extension-no-member
import os
import secrets
from datetime import datetime, timezone
from functools import lru_cache
from typing import Union

import xmlsec
from jinja2 import Environment, FileSystemLoader, select_autoescape
from lxml import etree
from OpenSSL.crypto import load_certificate, FILETYPE_PEM


DEFAULT_TEMPLATES_PATH = os.path.join(
    os.path.dirname(os.path.dirname(__file__)), "templates", "saml", "xml"
)

ISSUE_INSTANT_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def generate_id() -> str:
    # xs:ID values can not start with a digit
    return "_" + secrets.token_hex(41)  # total length 83.


def get_issue_instant() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def format_issue_instant(issue_instant: datetime) -> str:
    if issue_instant.tzinfo is not None:
        issue_instant = issue_instant.astimezone(timezone.utc)
    return issue_instant.strftime(ISSUE_INSTANT_FORMAT)


@lru_cache(maxsize=None)
def get_jinja_env(templates_path: str = DEFAULT_TEMPLATES_PATH) -> Environment:
    return Environment(
        loader=FileSystemLoader(templates_path),
        autoescape=select_autoescape(enabled_extensions=("xml", "jinja")),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def parse_xml(raw_xml: Union[str, bytes]) -> etree._Element:
    # whitespace is kept as is, signatures are computed over the exact bytes
    parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)
    if isinstance(raw_xml, str):
        raw_xml = raw_xml.encode("utf-8")
    return etree.fromstring(raw_xml, parser=parser)


def compute_keyname(cert):
    cert = load_certificate(FILETYPE_PEM, cert)
    sha256_fingerprint = cert.digest("sha256").decode().replace(":", "").lower()
    return sha256_fingerprint


def has_valid_signature(root, cert_data: str) -> bool:
    signature_node = xmlsec.tree.find_node(root, xmlsec.constants.NodeSignature)
    if signature_node is None:
        return False

    key = xmlsec.Key.from_memory(cert_data, xmlsec.constants.KeyDataFormatCertPem)
    ctx = xmlsec.SignatureContext()
    ctx.key = key
    ctx.register_id(root)
    try:
        ctx.verify(signature_node)
    except xmlsec.VerificationError:
        return False
    return True

