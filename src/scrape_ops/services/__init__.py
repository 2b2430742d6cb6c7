"""Services built on top of the integrations."""
