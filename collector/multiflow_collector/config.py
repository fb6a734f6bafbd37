"""
Collector configuration management.
"""

from pydantic import BaseModel, Field
from typing import Optional
import os


class CollectorConfig(BaseModel):
    """Configuration for the multiflow collector."""

    # Binding
    bind_host: str = Field(
        default_factory=lambda: os.getenv("MULTIFLOW_COLLECTOR_BIND_HOST", "0.0.0.0")
    )

    # UDP ports
    netflow_port: int = Field(
        default_factory=lambda: int(os.getenv("MULTIFLOW_COLLECTOR_NETFLOW_PORT", "9000"))
    )
    sflow_port: int = Field(
        default_factory=lambda: int(os.getenv("MULTIFLOW_COLLECTOR_SFLOW_PORT", "6343"))
    )

    # Health / metrics endpoint
    http_port: int = Field(
        default_factory=lambda: int(os.getenv("MULTIFLOW_COLLECTOR_HTTP_PORT", "8081"))
    )

    # Largest datagram accepted per recvfrom()
    recv_buffer_size: int = Field(
        default_factory=lambda: int(os.getenv("MULTIFLOW_COLLECTOR_RECV_BUFFER", "65535"))
    )

    # Socket buffer sizes (requires privileges)
    udp_rcvbuf_size: Optional[int] = Field(
        default_factory=lambda: int(os.getenv("MULTIFLOW_COLLECTOR_UDP_RCVBUF", "0")) or None
    )

    # Decoder bounds
    max_flowsets: int = Field(
        default_factory=lambda: int(os.getenv("MULTIFLOW_COLLECTOR_MAX_FLOWSETS", "256"))
    )

    # Logging
    log_level: str = Field(
        default_factory=lambda: os.getenv("MULTIFLOW_COLLECTOR_LOG_LEVEL", "INFO")
    )
    log_datagrams: bool = Field(
        default_factory=lambda: os.getenv("MULTIFLOW_COLLECTOR_LOG_DATAGRAMS", "false").lower() == "true"
    )
