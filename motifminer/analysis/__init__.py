"""Analyses run on the results of a completed mining run."""
