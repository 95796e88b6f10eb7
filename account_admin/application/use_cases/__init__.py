"""Application layer use cases."""
