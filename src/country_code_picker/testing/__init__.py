"""Testing helpers – property-based generators for picker inputs."""
