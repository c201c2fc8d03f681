"""Foundation layer: Result container, error taxonomy, failure boundary, configuration."""
