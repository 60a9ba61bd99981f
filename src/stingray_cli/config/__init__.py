"""Appliance profiles and CLI configuration."""
