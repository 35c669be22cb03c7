"""JSON Exporter Adapter - Outputs the attribute document of a lookup."""
import json
import os

import click

from ipset_lookup.domain.entities import LookupResult


class JSONExporter:
    """
    Implementation of OutputPort that writes the lookup result as JSON.

    On success the document holds the computed attributes of the IP set,
    on failure it holds the diagnostics list only.
    """

    def __init__(self, indent: int | None = 2):
        self._indent = indent

    def write(self, result: LookupResult, output_path: str) -> str:
        """
        Write a lookup result to a JSON file.

        Args:
            result: The lookup result to write
            output_path: Path for the output file. If no extension, .json is added.
                        Use "stdout" to print to console instead.

        Returns:
            The actual path where data was written
        """
        document = self.render(result)

        if output_path.lower() == "stdout":
            click.echo(document)
            return "stdout"

        if not output_path.endswith(".json"):
            output_path += ".json"

        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(document)
            f.write("\n")

        return output_path

    def render(self, result: LookupResult) -> str:
        """Serialize a lookup result to a JSON string."""
        return json.dumps(result.to_dict(), indent=self._indent, sort_keys=True)

    def get_format_name(self) -> str:
        return "JSON"
