"""Framework adapters for nodeql."""
