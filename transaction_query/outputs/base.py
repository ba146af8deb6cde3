# transaction_query/outputs/base.py
from abc import ABC, abstractmethod

class BaseOutput(ABC):
    @abstractmethod
    def write(self, report):
        """Write a list of (label, result) pairs to the chosen sink."""
        pass
