"""Editor host adapters for UI toolkits."""
