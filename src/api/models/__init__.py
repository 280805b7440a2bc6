"""Request and response models for the REST routes."""
