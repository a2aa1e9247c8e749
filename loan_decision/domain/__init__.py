"""Domain layer - exceptions and collaborator interfaces."""
