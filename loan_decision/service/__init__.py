"""Service layer - core business logic."""
