"""
Multiflow Collector - Main Entry Point

Supports three modes:
1. netflow - NetFlow v1/v5/v9 and IPFIX on one UDP port
2. sflow - sFlow v5 on its own UDP port
3. both - both listeners in one process
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import CollectorConfig
from .native_collector import NETFLOW, PROTOCOLS, SFLOW, NativeFlowCollector


def setup_logging(level: str = "INFO"):
    """Set up logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Multiflow Collector - NetFlow/IPFIX and sFlow decoder service"
    )
    parser.add_argument(
        "--mode",
        choices=[NETFLOW, SFLOW, "both"],
        default="both",
        help="Listeners to run: netflow (NetFlow/IPFIX), sflow, or both"
    )
    parser.add_argument(
        "--bind-host",
        type=str,
        help="Address to bind (default: from MULTIFLOW_COLLECTOR_BIND_HOST env var)"
    )
    parser.add_argument(
        "--netflow-port",
        type=int,
        help="NetFlow/IPFIX UDP port (default: 9000)"
    )
    parser.add_argument(
        "--sflow-port",
        type=int,
        help="sFlow UDP port (default: 6343)"
    )
    parser.add_argument(
        "--http-port",
        type=int,
        help="Health/metrics HTTP port (default: 8081)"
    )
    parser.add_argument(
        "--udp-rcvbuf",
        type=int,
        help="UDP socket receive buffer size in bytes"
    )
    parser.add_argument(
        "--max-flowsets",
        type=int,
        help="Upper bound on flow sets per NetFlow v9/IPFIX datagram (default: 256)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    parser.add_argument(
        "--log-datagrams",
        action="store_true",
        help="Log every decoded datagram"
    )
    return parser


def build_config(args: argparse.Namespace) -> CollectorConfig:
    """Create config from the environment, then override with CLI args."""
    config = CollectorConfig()

    if args.bind_host:
        config.bind_host = args.bind_host
    if args.netflow_port:
        config.netflow_port = args.netflow_port
    if args.sflow_port:
        config.sflow_port = args.sflow_port
    if args.http_port:
        config.http_port = args.http_port
    if args.udp_rcvbuf:
        config.udp_rcvbuf_size = args.udp_rcvbuf
    if args.max_flowsets:
        config.max_flowsets = args.max_flowsets
    if args.log_level:
        config.log_level = args.log_level
    if args.log_datagrams:
        config.log_datagrams = True

    return config


def protocols_for_mode(mode: str) -> List[str]:
    return list(PROTOCOLS) if mode == "both" else [mode]


async def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = build_config(args)

    setup_logging(config.log_level)

    logger = logging.getLogger(__name__)
    logger.info("Starting Multiflow Collector")
    logger.info(f"Mode: {args.mode}")

    collector = NativeFlowCollector(config, protocols=protocols_for_mode(args.mode))
    try:
        await collector.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


def run():
    asyncio.run(main())


if __name__ == "__main__":
    run()
