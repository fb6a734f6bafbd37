"""
Multiflow Collector - UDP collector for NetFlow/IPFIX and sFlow exporters.

Receives datagrams from routers and switches, decodes them with the
multiflow library and exposes health and decode metrics over HTTP.
"""

__version__ = "0.1.0"
