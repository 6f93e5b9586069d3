"""Core components: kind registry, compartments, projection and model sources."""
