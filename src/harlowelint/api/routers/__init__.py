"""HTTP routers for the REST API."""
