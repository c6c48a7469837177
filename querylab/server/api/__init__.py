"""HTTP API of the querylab server."""
