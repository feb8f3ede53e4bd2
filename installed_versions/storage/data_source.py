from abc import ABC, abstractmethod

from installed_versions.domain.models import Dataset


class DataSource(ABC):
    """
    Abstract base class for the external source a registry loads from.
    """

    @abstractmethod
    def load(self) -> Dataset:
        """
        Read the source and return its dataset.

        Implementations raise LoadError when the source is missing,
        unreadable, or does not have the dataset shape.
        """
        pass

    def describe(self) -> str:
        """Short human-readable location of the source, used in log messages."""
        return type(self).__name__
