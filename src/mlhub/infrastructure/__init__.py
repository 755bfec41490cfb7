"""Infrastructure layer - storage, configuration and wiring."""
