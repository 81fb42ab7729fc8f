"""Data model: items, itemsets, data points and the geometry backing them."""
