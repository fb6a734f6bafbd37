"""
Native Flow Collector - Receives NetFlow/IPFIX and sFlow from exporters.
"""

import asyncio
import json
import socket
import logging
from collections import Counter
from typing import Callable, Dict, Iterable, List, Optional, Tuple
from fastapi import FastAPI
import uvicorn

from multiflow import FlowDecodeError, NetflowDecoder, decode_sflow

from .config import CollectorConfig

logger = logging.getLogger(__name__)

NETFLOW = "netflow"
SFLOW = "sflow"
PROTOCOLS = (NETFLOW, SFLOW)

# callback(protocol, datagram, (host, port))
DatagramCallback = Callable[[str, object, Tuple], None]


class NativeFlowCollector:
    """
    Collects NetFlow/IPFIX and sFlow datagrams from network devices.

    Listens on UDP ports:
    - 9000: NetFlow v1/v5/v9 and IPFIX (version detected per datagram)
    - 6343: sFlow v5

    A datagram that fails to decode is logged and counted; the listener
    keeps running.
    """

    def __init__(
        self,
        config: CollectorConfig,
        protocols: Iterable[str] = PROTOCOLS,
        callback: Optional[DatagramCallback] = None,
        decoder: Optional[NetflowDecoder] = None,
    ):
        self.config = config
        self.protocols = tuple(protocols)
        self.callback = callback
        self.decoder = decoder or NetflowDecoder(max_flowsets=config.max_flowsets)
        self.received: Counter = Counter()
        self.decoded: Counter = Counter()
        self.failed: Counter = Counter()
        self.failures_by_kind: Counter = Counter()
        self._shutdown = False
        self.app: Optional[FastAPI] = None
        self._setup_http_routes()

    def _setup_http_routes(self):
        """Set up HTTP routes for health checks and metrics."""
        self.app = FastAPI(title="Multiflow Native Flow Collector")

        @self.app.get("/health")
        async def health():
            """Health check endpoint."""
            return {
                "status": "healthy",
                "service": "native-flow-collector",
                "protocols": list(self.protocols),
            }

        @self.app.get("/metrics")
        async def metrics():
            """Collector metrics."""
            return self.get_metrics()

    async def start(self):
        """Start the collector."""
        logger.info("Starting Native Flow Collector")
        logger.info(f"  Protocols: {', '.join(self.protocols)}")
        if NETFLOW in self.protocols:
            logger.info(f"  NetFlow/IPFIX port: {self.config.netflow_port}")
        if SFLOW in self.protocols:
            logger.info(f"  sFlow port: {self.config.sflow_port}")
        logger.info(f"  Max flow sets per datagram: {self.config.max_flowsets}")

        sockets: List[socket.socket] = []
        tasks: List[asyncio.Task] = []
        try:
            if NETFLOW in self.protocols:
                netflow_sock = self._create_udp_socket(self.config.netflow_port)
                sockets.append(netflow_sock)
                tasks.append(asyncio.create_task(
                    self._udp_listener(netflow_sock, self.handle_netflow_packet)
                ))
            if SFLOW in self.protocols:
                sflow_sock = self._create_udp_socket(self.config.sflow_port)
                sockets.append(sflow_sock)
                tasks.append(asyncio.create_task(
                    self._udp_listener(sflow_sock, self.handle_sflow_packet)
                ))

            # Start HTTP server for health/metrics
            if self.app:
                http_config = uvicorn.Config(
                    self.app,
                    host=self.config.bind_host,
                    port=self.config.http_port,
                    log_level=self.config.log_level.lower(),
                )
                http_server = uvicorn.Server(http_config)
                tasks.append(asyncio.create_task(http_server.serve()))
                logger.info(f"HTTP server started on {self.config.bind_host}:{self.config.http_port}")

            await asyncio.gather(*tasks)
        except asyncio.CancelledError:
            logger.info("Shutting down Native Flow Collector...")
        finally:
            # A failed bind must not leak the sockets already opened
            self._shutdown = True
            for sock in sockets:
                sock.close()
            for task in tasks:
                task.cancel()

    def _create_udp_socket(self, port: int) -> socket.socket:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        # Allows multiple instances to bind to same port - OS load balances UDP packets
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
        except (AttributeError, OSError):
            logger.warning(f"SO_REUSEPORT not available on port {port} - single instance only")

        # Set UDP receive buffer size if configured (requires privileges)
        if self.config.udp_rcvbuf_size:
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_RCVBUF, self.config.udp_rcvbuf_size)
                logger.info(f"UDP receive buffer on port {port} set to {self.config.udp_rcvbuf_size} bytes")
            except OSError as e:
                logger.warning(f"Could not set UDP receive buffer size: {e} (may require root/privileges)")

        sock.bind((self.config.bind_host, port))
        sock.setblocking(False)
        return sock

    async def _udp_listener(self, sock: socket.socket, handler):
        """Generic UDP listener."""
        loop = asyncio.get_event_loop()
        while not self._shutdown:
            try:
                data, addr = await loop.sock_recvfrom(sock, self.config.recv_buffer_size)
                if data:
                    handler(data, addr)
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Error in UDP listener: {e}", exc_info=True)

    def handle_netflow_packet(self, data: bytes, addr: Tuple):
        """Decode a NetFlow v1/v5/v9 or IPFIX datagram received from addr."""
        return self._handle_packet(NETFLOW, lambda: self.decoder.decode(data, addr), addr)

    def handle_sflow_packet(self, data: bytes, addr: Tuple):
        """Decode an sFlow datagram received from addr."""
        return self._handle_packet(SFLOW, lambda: decode_sflow(data), addr)

    def _handle_packet(self, protocol: str, decode: Callable, addr: Tuple):
        self.received[protocol] += 1
        try:
            datagram = decode()
        except FlowDecodeError as e:
            self._record_failure(protocol, e)
            logger.warning(f"Could not decode {protocol} datagram from {addr}: {e}")
            return None
        except Exception as e:
            self._record_failure(protocol, e)
            logger.error(f"Error decoding {protocol} datagram from {addr}: {e}", exc_info=True)
            return None

        self.decoded[protocol] += 1
        if self.config.log_datagrams:
            logger.info(f"{protocol} datagram from {addr}: {json.dumps(datagram.to_dict())}")

        if self.callback:
            try:
                self.callback(protocol, datagram, addr)
            except Exception as e:
                logger.error(f"Datagram callback failed for {protocol} from {addr}: {e}", exc_info=True)
        return datagram

    def _record_failure(self, protocol: str, error: Exception):
        self.failed[protocol] += 1
        self.failures_by_kind[type(error).__name__] += 1

    def get_metrics(self) -> Dict:
        """Get collector metrics (synchronous, safe to call from HTTP handlers)."""
        return {
            "received": {p: self.received[p] for p in self.protocols},
            "decoded": {p: self.decoded[p] for p in self.protocols},
            "failed": {p: self.failed[p] for p in self.protocols},
            "failures_by_kind": dict(self.failures_by_kind),
            "templates": {
                "netflow_v9": self.decoder.registry.snapshot(),
                "ipfix": self.decoder.ipfix_registry.snapshot(),
            },
        }
