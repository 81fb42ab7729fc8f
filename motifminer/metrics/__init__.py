"""Evaluation metrics in three tiers: simple, extraction and extraction-dependent."""
