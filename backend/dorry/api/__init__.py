"""HTTP API for the Dorry design pipeline."""
