"""Runtime services: telemetry and editor settings."""
