"""CSV Exporter Adapter - Outputs IP set addresses to CSV files."""
import csv
import os
import sys
from datetime import datetime, timezone
from typing import TextIO

from ipset_lookup.domain.entities import LookupResult


class CSVExporter:
    """
    Implementation of OutputPort that writes one CSV row per address.

    A failed lookup produces a header-only file; diagnostics are the
    business of the JSON exporter and the logger.
    """

    HEADERS = [
        "IPSet ID",
        "IPSet Name",
        "Scope",
        "IPSet ARN",
        "IP Address Version",
        "Address",
    ]

    def write(self, result: LookupResult, output_path: str) -> str:
        """
        Write the addresses of a lookup result to a CSV file.

        Args:
            result: The lookup result to write
            output_path: Path for the output file. If no extension, .csv is added.
                        Use "stdout" to print to console instead.

        Returns:
            The actual path where data was written
        """
        if output_path.lower() == "stdout":
            self._write_rows(result, sys.stdout)
            return "stdout"

        if not output_path.endswith(".csv"):
            output_path += ".csv"

        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
            self._write_rows(result, csvfile)

        return output_path

    def get_format_name(self) -> str:
        return "CSV"

    def _write_rows(self, result: LookupResult, stream: TextIO) -> None:
        writer = csv.DictWriter(stream, fieldnames=self.HEADERS)
        writer.writeheader()
        writer.writerows(self._build_rows(result))

    def _build_rows(self, result: LookupResult) -> list[dict]:
        """Build CSV rows, addresses sorted for stable output."""
        ip_set = result.ip_set
        if ip_set is None:
            return []

        return [
            {
                "IPSet ID": ip_set.id,
                "IPSet Name": ip_set.name,
                "Scope": ip_set.scope.value if ip_set.scope else "",
                "IPSet ARN": ip_set.arn,
                "IP Address Version": ip_set.ip_address_version.value,
                "Address": address,
            }
            for address in sorted(ip_set.addresses)
        ]


def generate_output_filename(
    result: LookupResult,
    prefix: str = "ipset",
    extension: str = "json",
) -> str:
    """
    Generate a default output filename.

    Format: {prefix}-{ipset_name}-{timestamp}.{extension}
    """
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    name = result.ip_set.name if result.ip_set else "not-found"
    return f"{prefix}-{name}-{timestamp}.{extension}"
