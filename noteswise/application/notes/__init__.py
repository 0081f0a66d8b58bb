"""Notes bounded context - Application layer."""
