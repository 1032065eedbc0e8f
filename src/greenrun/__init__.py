"""GreenRun: energy, carbon and cost estimates for request-driven container workloads."""

__version__ = "0.1.0"
