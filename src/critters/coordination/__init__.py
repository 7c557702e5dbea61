"""Per-frame orchestration."""
