"""Application version."""

VERSION = "2.6.1"
