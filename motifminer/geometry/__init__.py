"""Pairwise geometry of data points and the matching of itemsets to concrete observations."""
