"""Scripted Prometheus exporter for deterministic end-to-end tests."""
