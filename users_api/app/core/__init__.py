"""Configuration, persistence plumbing, logging and shared error types."""
