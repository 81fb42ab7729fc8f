"""Errors raised by the mining engine and its collaborators."""


class ItemsetMinerError(RuntimeError):
    """Raised when an invariant of the mining procedure is violated. Fatal for the run."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ValueError):
    """Raised before mining starts, when configuration is missing, malformed or conflicting."""


class MetricEvaluationError(ItemsetMinerError):
    """Raised on the controlling thread after all workers of a phase were joined, when at least
    one of them failed. Results of the phase are discarded.
    """
    def __init__(self, phase: str, failures: int, total: int):
        self.phase = phase
        self.failures = failures
        self.total = total
        super().__init__(f'{failures} of {total} tasks failed during {phase}.')


class CandidateGenerationError(ItemsetMinerError):
    """Raised when the candidate matcher is asked for geometry it was never given."""


class DistributionSamplerError(ItemsetMinerError):
    """Raised when background sampling cannot be set up or a sampling round fails."""
