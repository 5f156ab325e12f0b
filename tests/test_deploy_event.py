"""Tests for deploy events."""

from stackdriver.deploy_event import DeployEvent


class TestDeployEvent:
    """Tests for the deploy event payload."""

    def test_minimal_payload(self) -> None:
        """Only revision_id is sent when nothing else is set."""
        assert DeployEvent(revision_id="abc123").to_dict() == {"revision_id": "abc123"}

    def test_full_payload(self) -> None:
        """Every set field appears in the body."""
        event = DeployEvent(
            revision_id="abc123",
            deployed_by="jenkins",
            deployed_to="production",
            repository="web",
        )
        assert event.to_dict() == {
            "revision_id": "abc123",
            "deployed_by": "jenkins",
            "deployed_to": "production",
            "repository": "web",
        }

    def test_partial_payload_omits_unset_fields(self) -> None:
        """Unset fields are absent, not null."""
        body = DeployEvent(revision_id="abc123", deployed_to="staging").to_dict()
        assert body == {"revision_id": "abc123", "deployed_to": "staging"}

    def test_has_class_docstring(self) -> None:
        """The class documents itself instead of using the generated signature."""
        assert not DeployEvent.__doc__.startswith("DeployEvent(")
