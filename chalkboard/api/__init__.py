"""HTTP API for timeline queries."""
