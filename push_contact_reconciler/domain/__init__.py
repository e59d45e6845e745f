"""Domain layer - Send results and their classification."""
