"""Adapters: HTTP API, dashboard and command-line entry points."""
