"""Host integrations for the modal engine."""
