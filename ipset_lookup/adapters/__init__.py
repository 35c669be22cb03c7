"""Adapters - Concrete implementations of ports."""
from ipset_lookup.adapters.outbound import (
    Boto3WAFv2Client,
    CloudWatchLogger,
    ConsoleLogger,
    CSVExporter,
    JSONExporter,
    generate_output_filename,
)

__all__ = [
    "Boto3WAFv2Client",
    "CSVExporter",
    "JSONExporter",
    "generate_output_filename",
    "ConsoleLogger",
    "CloudWatchLogger",
]
