"""Framework-free domain logic: scoring, categories, catalog and services."""
