"""Infrastructure layer - concrete collaborator implementations."""
