"""Permutation-based significance estimation."""
