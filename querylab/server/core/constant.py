"""Application-wide constants for the web server."""

PROJECT_NAME = "querylab"
API_V1_STR = "/api/v1"
VERSION = "0.1.0"
SCHEMA_VERSION = "v1"
