"""Pure decision rules for update analysis and report review."""
