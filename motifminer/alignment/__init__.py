"""Interface to the external superposition and clustering of observations."""
