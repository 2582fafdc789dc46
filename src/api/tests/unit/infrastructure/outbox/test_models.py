"""Unit tests for BillingEventModel."""

from datetime import UTC, datetime

from infrastructure.outbox.models import BillingEventModel


class TestBillingEventModelToValueObject:
    """Tests for BillingEventModel.to_value_object()."""

    def test_copies_all_fields(self):
        """The value object mirrors the row."""
        created_at = datetime(2026, 1, 8, 12, 0, 0, tzinfo=UTC)
        model = BillingEventModel(
            id="01ARZCX0P0HZGQP3MZXQQ0NN01",
            organization_id="01ARZCX0P0HZGQP3MZXQQ0NNZZ",
            event_type="organization.created",
            payload={"organization_id": "01ARZCX0P0HZGQP3MZXQQ0NNZZ"},
            published=False,
            published_at=None,
            created_at=created_at,
        )

        event = model.to_value_object()

        assert event.id == "01ARZCX0P0HZGQP3MZXQQ0NN01"
        assert event.organization_id == "01ARZCX0P0HZGQP3MZXQQ0NNZZ"
        assert event.event_type == "organization.created"
        assert event.payload == {"organization_id": "01ARZCX0P0HZGQP3MZXQQ0NNZZ"}
        assert event.created_at == created_at
        assert event.published is False
        assert event.published_at is None


class TestBillingEventModelTable:
    """Tests for the table definition."""

    def test_unpublished_index_is_partial(self):
        """The poll index only covers unpublished rows."""
        indexes = {index.name: index for index in BillingEventModel.__table__.indexes}

        index = indexes["idx_billing_events_unpublished"]

        assert [column.name for column in index.columns] == ["event_type", "created_at"]
        assert "published = false" in str(index.dialect_options["postgresql"]["where"])
