"""Output Port - Interface for writing lookup results."""
from typing import Protocol

from ipset_lookup.domain.entities import LookupResult


class OutputPort(Protocol):
    """
    Port interface for writing lookup results.

    Implementations could output to:
    - JSON document (attribute map, main use case)
    - CSV file (one row per address)
    """

    def write(self, result: LookupResult, output_path: str) -> str:
        """
        Write a lookup result to the specified output.

        Args:
            result: The lookup result to write
            output_path: Path or destination for the output ("stdout" for console)

        Returns:
            The actual path/location where data was written
        """
        ...

    def get_format_name(self) -> str:
        """
        Get the name of the output format.

        Returns:
            Format name (e.g., "JSON", "CSV")
        """
        ...
