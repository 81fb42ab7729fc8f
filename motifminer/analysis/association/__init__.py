"""Association rules between mined itemsets."""
