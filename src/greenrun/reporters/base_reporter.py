# src/greenrun/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod

from ..models.estimate import EstimateResult


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """

    @abstractmethod
    def report(self, result: EstimateResult):
        """
        Takes a finished estimate and presents it in a specific format.
        """
        pass
