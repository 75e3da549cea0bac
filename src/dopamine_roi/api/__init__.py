"""HTTP API layer: routers, schemas, dependency wiring and error handlers."""
