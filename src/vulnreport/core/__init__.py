"""Domain models, ports and use cases."""
