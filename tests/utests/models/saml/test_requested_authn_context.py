import pytest
from pydantic import ValidationError

from samlsp.models.enums import AuthnContextComparisonType, AuthnContextType
from samlsp.models.saml.requested_authn_context import RequestedAuthnContext


def test_comparison_not_specified_by_default():
    requested_authn_context = RequestedAuthnContext()

    assert requested_authn_context.comparison is None
    assert not requested_authn_context.comparison_specified

    requested_authn_context.comparison = AuthnContextComparisonType.EXACT
    assert requested_authn_context.comparison_specified


def test_values_and_element_names_stay_aligned():
    requested_authn_context = RequestedAuthnContext()
    requested_authn_context.add_reference("urn:class")
    requested_authn_context.add_reference(
        "urn:decl", AuthnContextType.AUTHN_CONTEXT_DECL_REF
    )

    assert requested_authn_context.values == ["urn:class", "urn:decl"]
    assert requested_authn_context.element_names == [
        AuthnContextType.AUTHN_CONTEXT_CLASS_REF,
        AuthnContextType.AUTHN_CONTEXT_DECL_REF,
    ]


def test_items_are_not_shared_between_instances():
    first = RequestedAuthnContext()
    first.add_reference("urn:class")

    assert not RequestedAuthnContext().items


def test_comparison_assignment_is_validated():
    requested_authn_context = RequestedAuthnContext()
    requested_authn_context.comparison = "minimum"

    assert requested_authn_context.comparison == AuthnContextComparisonType.MINIMUM

    with pytest.raises(ValidationError):
        requested_authn_context.comparison = "sometimes"
