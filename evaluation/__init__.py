"""Scenario harness for seeded recommendation checks."""
