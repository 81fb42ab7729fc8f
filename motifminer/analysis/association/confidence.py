"""Confidence of association rules between mined itemsets of equal size."""
from math import isinf

import pandas as pd

from motifminer.model.itemset import Itemset
from motifminer.mining.itemset_miner import ItemsetMiner
from motifminer.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


class ConfidenceAnalyzer:
    """For ordered pairs of distinct mined itemsets of equal size whose union was also mined,
    confidence(A => B) = support(A ∪ B) / support(A).
    """
    confidence: dict[tuple[Itemset, Itemset], float]

    def __init__(self, itemset_miner: ItemsetMiner):
        self.itemset_miner = itemset_miner
        self.confidence = {}
        self.calculate_confidence()

    def calculate_confidence(self) -> None:
        total_itemsets = self.itemset_miner.total_itemsets
        mined = {itemset: itemset for itemset in total_itemsets}
        confidence = {}
        for antecedent in total_itemsets:
            for consequent in total_itemsets:
                if antecedent == consequent or len(antecedent) != len(consequent):
                    continue
                joined = mined.get(antecedent.union(consequent))
                if joined is None or antecedent.support == 0 or isinf(antecedent.support):
                    continue
                value = joined.support / antecedent.support
                logger.debug(
                    'Confidence for rule %s => %s is %s.',
                    antecedent.to_simple_string(),
                    consequent.to_simple_string(),
                    value,
                )
                confidence[(antecedent, consequent)] = value
        self.confidence = dict(sorted(confidence.items(), key=lambda entry: -entry[1]))

    def to_dataframe(self) -> pd.DataFrame:
        rows = [
            {
                'antecedent': antecedent.to_simple_string(),
                'consequent': consequent.to_simple_string(),
                'confidence': value,
            }
            for (antecedent, consequent), value in self.confidence.items()
        ]
        return pd.DataFrame(rows, columns=['antecedent', 'consequent', 'confidence'])
