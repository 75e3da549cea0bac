"""Infrastructure adapters: database repositories and outbound HTTP integrations."""
