"""Hotel registration and room inventory configuration."""
