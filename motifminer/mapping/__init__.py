"""Rules transforming item labels before mining."""
