"""Configuration value objects for metrics, the mining engine and significance estimation."""
