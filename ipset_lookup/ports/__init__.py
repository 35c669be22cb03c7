"""Ports - Abstract interfaces for external dependencies."""
from ipset_lookup.ports.outbound import IPSetClientPort, LoggerPort, OutputPort

__all__ = ["IPSetClientPort", "OutputPort", "LoggerPort"]
