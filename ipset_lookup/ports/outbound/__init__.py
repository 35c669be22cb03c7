"""Outbound ports - Interfaces for driven adapters."""
from ipset_lookup.ports.outbound.ipset_client_port import IPSetClientPort
from ipset_lookup.ports.outbound.logger_port import LoggerPort
from ipset_lookup.ports.outbound.output_port import OutputPort

__all__ = ["IPSetClientPort", "OutputPort", "LoggerPort"]
