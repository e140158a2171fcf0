"""Feature modules for compandauth."""
