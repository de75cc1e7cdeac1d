"""Command-line interface for querying NEAR and Aurora nodes."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from typing import Any

from .client import Web3Client
from .config import NETWORKS, AppConfig, load_config, resolve_rpc_url
from .exceptions import NearPluginError
from .logging_setup import configure_logging
from .models import BlockReference, Finality
from .plugins import AuroraPlugin, NearPlugin

logger = logging.getLogger(__name__)

_AURORA_METHODS = {
    "pending": "parity_pending_transactions",
    "txpool-status": "txpool_status",
    "txpool-inspect": "txpool_inspect",
    "txpool-content": "txpool_content",
}


def _block_id(value: str) -> int | str:
    return int(value) if value.isdigit() else value


def _add_block_reference(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--block-id", type=_block_id, help="Block height or hash")
    group.add_argument(
        "--finality",
        choices=[f.value for f in Finality],
        help="Finality (default: final)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="near-web3",
        description="Query NEAR Protocol and Aurora JSON-RPC nodes",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--rpc-url",
        default=None,
        help="RPC URL or network name (mainnet, testnet, localnet...), overrides config",
    )
    parser.add_argument(
        "--network",
        default=None,
        choices=sorted(NETWORKS),
        help="Well-known network to connect to, overrides config (--rpc-url wins)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("status", help="Node status")
    sub.add_parser("gas-price", help="Latest gas price")
    sub.add_parser("validators", help="Validators of the latest epoch")

    block_parser = sub.add_parser("block", help="Block details")
    _add_block_reference(block_parser)

    balance_parser = sub.add_parser("balance", help="Account balance in yoctoNEAR")
    balance_parser.add_argument("account_id", help="NEAR account id")
    _add_block_reference(balance_parser)

    aurora_parser = sub.add_parser("aurora", help="Aurora-specific RPC methods")
    aurora_parser.add_argument("method", choices=sorted(_AURORA_METHODS))

    return parser


def _block_reference(args: argparse.Namespace) -> BlockReference:
    if args.block_id is not None:
        return BlockReference(block_id=args.block_id)
    return BlockReference(finality=Finality(args.finality or Finality.FINAL))


def _client(args: argparse.Namespace, config: AppConfig) -> Web3Client:
    if args.command == "aurora":
        provider_cfg = config.aurora
        plugin: NearPlugin | AuroraPlugin = AuroraPlugin()
    else:
        provider_cfg = config.near
        plugin = NearPlugin()
    endpoint = args.rpc_url or args.network
    if endpoint:
        provider_cfg = replace(provider_cfg, rpc_url=resolve_rpc_url(endpoint))

    client = Web3Client(provider_cfg)
    client.register_plugin(plugin)
    return client


async def _run(args: argparse.Namespace) -> Any:
    """Execute the selected command and return its JSON-serializable result."""
    config = load_config(args.config)
    client = _client(args, config)

    if args.command == "aurora":
        return await getattr(client.aurora, _AURORA_METHODS[args.method])()

    near: NearPlugin = client.near
    if args.command == "status":
        return await near.status()
    if args.command == "gas-price":
        return str(await near.get_gas_price())
    if args.command == "validators":
        return await near.validators(None)
    if args.command == "block":
        return await near.block(_block_reference(args))
    if args.command == "balance":
        return str(await near.get_balance(args.account_id, _block_reference(args)))
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(args.log_level)
    try:
        result = asyncio.run(_run(args))
    except NearPluginError as e:
        logger.error("%s", e)
        sys.exit(2)
    print(json.dumps(result, indent=2))
