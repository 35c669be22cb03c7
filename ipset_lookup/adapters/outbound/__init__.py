"""Outbound adapters - External services (AWS WAFv2, exporters, logging)."""
from ipset_lookup.adapters.outbound.boto3_wafv2_client import Boto3WAFv2Client
from ipset_lookup.adapters.outbound.cloudwatch_logger import CloudWatchLogger
from ipset_lookup.adapters.outbound.console_logger import ConsoleLogger
from ipset_lookup.adapters.outbound.csv_exporter import CSVExporter, generate_output_filename
from ipset_lookup.adapters.outbound.json_exporter import JSONExporter
from ipset_lookup.adapters.outbound.structured_logger import StructuredLogger

__all__ = [
    "Boto3WAFv2Client",
    "CSVExporter",
    "JSONExporter",
    "generate_output_filename",
    "ConsoleLogger",
    "CloudWatchLogger",
    "StructuredLogger",
]
