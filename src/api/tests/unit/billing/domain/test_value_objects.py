"""Unit tests for billing domain value objects."""

import pytest

from billing.domain.events import ORGANIZATION_CREATED, OrganizationCreated
from billing.domain.value_objects import BillingWorkspaceId, OrganizationId


class TestOrganizationId:
    """Tests for OrganizationId."""

    def test_from_string_accepts_ulid(self):
        org_id = OrganizationId.from_string("01ARZCX0P0HZGQP3MZXQQ0NNZZ")
        assert str(org_id) == "01ARZCX0P0HZGQP3MZXQQ0NNZZ"

    @pytest.mark.parametrize("value", ["org_A", "", "01ARZCX0P0HZGQP3MZXQQ0NNZ"])
    def test_from_string_rejects_non_ulid(self, value):
        with pytest.raises(ValueError, match="Invalid OrganizationId"):
            OrganizationId.from_string(value)

    def test_generate_returns_parseable_ids(self):
        first = OrganizationId.generate()
        second = OrganizationId.generate()

        assert first != second
        assert OrganizationId.from_string(first.value) == first


class TestBillingWorkspaceId:
    """Tests for BillingWorkspaceId."""

    def test_generate_is_unique(self):
        ids = {BillingWorkspaceId.generate().value for _ in range(100)}
        assert len(ids) == 100


def test_organization_created_type_tag():
    assert ORGANIZATION_CREATED == "organization.created"
    event = OrganizationCreated(organization_id=OrganizationId.generate())
    assert event.country_code == ""
