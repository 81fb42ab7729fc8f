"""Significance of mined itemsets against permutation backgrounds."""
from math import isfinite

from scipy.stats import kstest  # type: ignore
from scipy.stats import norm  # type: ignore

from motifminer.model.itemset import Itemset
from motifminer.model.distribution import Distribution
from motifminer.mining.itemset_miner import ItemsetMiner
from motifminer.configuration.significance import SignificanceEstimatorConfiguration
from motifminer.analysis.statistics.distribution_sampler import DistributionSampler
from motifminer.standalone_utilities.log_formats import colorized_logger

logger = colorized_logger(__name__)


class SignificanceEstimator:
    """Fits a normal model to each itemset's background distribution, checks the fit with a
    one-sample Kolmogorov-Smirnov test, and takes the normal CDF at the observed score as the
    p-value. Itemsets with a poor fit (KS p-value below the KS cutoff) are not assessed.
    """
    itemset_miner: ItemsetMiner
    configuration: SignificanceEstimatorConfiguration
    background_distributions: dict[Itemset, Distribution]
    evaluated_itemsets: list[Itemset]
    significant_itemsets: list[Itemset]

    def __init__(self, itemset_miner: ItemsetMiner, configuration: SignificanceEstimatorConfiguration):
        self.itemset_miner = itemset_miner
        self.configuration = configuration
        self.background_distributions = {}
        self.evaluated_itemsets = []
        self.significant_itemsets = []

    def estimate(self) -> list[Itemset]:
        sampler = DistributionSampler(
            self.itemset_miner,
            self.configuration.significance_type,
            self.configuration.sample_size,
            self.configuration.level_of_parallelism,
            seed=self.configuration.seed,
        )
        self.background_distributions = sampler.sample()
        return self.determine_significance()

    def determine_significance(self, significance_cutoff: float | None = None) -> list[Itemset]:
        """Assigns p-values and KS values, and returns the significant itemsets by ascending
        p-value.
        """
        if significance_cutoff is None:
            significance_cutoff = self.configuration.significance_cutoff
        score_name = self.configuration.significance_type.value
        evaluated = []
        for itemset, distribution in self.background_distributions.items():
            values = distribution.values()
            if len(values) < 2:
                logger.warning('Too few background values for itemset %s, skipping.', itemset.to_simple_string())
                continue
            mean = float(values.mean())
            standard_deviation = float(values.std(ddof=1))
            if not isfinite(standard_deviation) or standard_deviation == 0:
                logger.warning('Degenerate background for itemset %s, skipping.', itemset.to_simple_string())
                continue
            ks = float(kstest(values, 'norm', args=(mean, standard_deviation)).pvalue)
            if ks < self.configuration.ks_cutoff:
                logger.warning(
                    'Background distribution of itemset %s violates KS cutoff (%s), skipping.',
                    itemset.to_simple_string(),
                    ks,
                )
                continue
            observed = getattr(itemset, score_name)
            itemset.p_value = float(norm.cdf(observed, loc=mean, scale=standard_deviation))
            itemset.ks = ks
            logger.debug('p-value for itemset %s is %s.', itemset.to_simple_string(), itemset.p_value)
            evaluated.append(itemset)
        self.evaluated_itemsets = sorted(evaluated, key=lambda itemset: itemset.p_value)
        self.significant_itemsets = [
            itemset for itemset in self.evaluated_itemsets if itemset.p_value < significance_cutoff
        ]
        logger.info(
            '%s of %s itemsets are significant at cutoff %s.',
            len(self.significant_itemsets),
            len(self.background_distributions),
            significance_cutoff,
        )
        return self.significant_itemsets
