# pylint: disable=c-extension-no-member
import base64
from datetime import datetime
from typing import Any, Dict, List, Union

from jinja2 import Environment
from lxml import etree

from samlsp.misc.saml_utils import (
    format_issue_instant,
    generate_id,
    get_issue_instant,
    get_jinja_env,
    parse_xml,
)
from samlsp.models.saml.conditions import AudienceRestriction, Conditions
from samlsp.models.saml.constants import SAML_VERSION
from samlsp.models.saml.name_id import NameID
from samlsp.models.saml.name_id_policy import NameIDPolicy
from samlsp.models.saml.requested_authn_context import RequestedAuthnContext


def _as_xs_boolean(value: Union[bool, None]) -> Union[str, None]:
    if value is None:
        return None
    return "true" if value else "false"


class AuthnRequest:  # pylint: disable=too-many-instance-attributes
    """
    In memory representation of a samlp:AuthnRequest.

    A freshly constructed request is already valid: it has a unique ID, the
    protocol version, an IssueInstant and an (empty) Issuer. All other
    attributes are optional and are left out of the rendered XML as long as
    they are None.
    """

    TEMPLATE_PATH = "authn_request.xml.jinja"

    def __init__(
        self,
        request_id: Union[str, None] = None,
        issue_instant: Union[datetime, None] = None,
    ) -> None:
        self._id = request_id if request_id else generate_id()
        self._version = SAML_VERSION
        self._issue_instant = (
            issue_instant if issue_instant is not None else get_issue_instant()
        )
        self._issuer = NameID()

        self.destination: Union[str, None] = None
        self.assertion_consumer_service_url: Union[str, None] = None
        self.protocol_binding: Union[str, None] = None
        self.force_authn: Union[bool, None] = None
        self.is_passive: Union[bool, None] = None
        self.provider_name: Union[str, None] = None
        self.attribute_consuming_service_index: Union[int, None] = None
        self.name_id_policy: Union[NameIDPolicy, None] = None
        self.requested_authn_context: Union[RequestedAuthnContext, None] = None
        self.conditions: Union[Conditions, None] = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def version(self) -> str:
        return self._version

    @property
    def issue_instant(self) -> datetime:
        return self._issue_instant

    @property
    def issuer(self) -> Union[str, None]:
        return self._issuer.value

    @issuer.setter
    def issuer(self, value: Union[str, None]) -> None:
        self._issuer.value = value

    @property
    def issuer_format(self) -> Union[str, None]:
        return self._issuer.format

    @issuer_format.setter
    def issuer_format(self, value: Union[str, None]) -> None:
        self._issuer.format = value

    def set_conditions(self, audience_restrictions: List[AudienceRestriction]):
        self.conditions = Conditions(audience_restrictions=audience_restrictions)

    def get_context(self) -> Dict[str, Any]:
        name_id_policy = None
        if self.name_id_policy is not None:
            name_id_policy = {
                "format": self.name_id_policy.format,
                "sp_name_qualifier": self.name_id_policy.sp_name_qualifier,
                "allow_create": _as_xs_boolean(self.name_id_policy.allow_create),
            }

        requested_authn_context = None
        if self.requested_authn_context is not None:
            comparison = self.requested_authn_context.comparison
            requested_authn_context = {
                "comparison": None if comparison is None else comparison.value,
                "items": [
                    {"value": item.value, "kind": item.kind.value}
                    for item in self.requested_authn_context.items
                ],
            }

        conditions = None
        if self.conditions is not None:
            conditions = {
                "audience_restrictions": [
                    {"audiences": list(restriction.audiences)}
                    for restriction in self.conditions.audience_restrictions
                ]
            }

        return {
            "ID": self.id,
            "version": self.version,
            "issue_instant": format_issue_instant(self.issue_instant),
            "destination": self.destination,
            "force_authn": _as_xs_boolean(self.force_authn),
            "is_passive": _as_xs_boolean(self.is_passive),
            "protocol_binding": self.protocol_binding,
            "assertion_consumer_service_url": self.assertion_consumer_service_url,
            "attribute_consuming_service_index": self.attribute_consuming_service_index,
            "provider_name": self.provider_name,
            "issuer": self.issuer if self.issuer is not None else "",
            "issuer_format": self.issuer_format,
            "name_id_policy": name_id_policy,
            "requested_authn_context": requested_authn_context,
            "conditions": conditions,
        }

    def render(self, jinja_env: Union[Environment, None] = None) -> str:
        if jinja_env is None:
            jinja_env = get_jinja_env()
        template = jinja_env.get_template(self.TEMPLATE_PATH)
        return template.render(self.get_context())

    @property
    def root(self) -> etree._Element:
        return parse_xml(self.render())

    def get_xml(self, xml_declaration: bool = False) -> bytes:
        if xml_declaration:
            return etree.tostring(self.root, xml_declaration=True, encoding="UTF-8")
        return etree.tostring(self.root)

    def get_base64_string(self) -> bytes:
        return base64.b64encode(self.get_xml())
