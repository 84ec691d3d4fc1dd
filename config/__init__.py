"""Settings package: env and YAML configuration."""
