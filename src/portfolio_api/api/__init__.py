"""HTTP layer: FastAPI application, routes, schemas and guards."""
