"""Domain layer: settings constants and the error taxonomy."""
