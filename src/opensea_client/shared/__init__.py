"""Shared models for the OpenSea API client."""
