"""Application layer: the store port and the configuration service."""
