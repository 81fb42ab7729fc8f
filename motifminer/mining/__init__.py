"""The level-wise mining engine."""
