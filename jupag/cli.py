#!/usr/bin/env python3
"""
JUPAG - Command line

Thin argparse front end over the client and the flows.
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from pydantic import TypeAdapter

from jupag.config import ClientConfig
from jupag.core.client import JupiterClient
from jupag.core.rpc import SolanaClient
from jupag.core.wallet import WalletManager
from jupag.exceptions import ConfigError, JupagError
from jupag.flows import swap_with_instructions, swap_with_transaction, ultra_swap
from jupag.logger import JupagLogger
from jupag.types import QuoteRequest, SwapMode, UltraOrderRequest

SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"


def _add_trade_args(parser: argparse.ArgumentParser):
    parser.add_argument("--input-mint", default=SOL_MINT, help="Mint to sell (default: SOL)")
    parser.add_argument("--output-mint", default=USDC_MINT, help="Mint to buy (default: USDC)")
    parser.add_argument("--amount", type=int, required=True, help="Raw amount in base units")


def _add_quote_args(parser: argparse.ArgumentParser):
    _add_trade_args(parser)
    parser.add_argument("--slippage-bps", type=int, help="Max slippage in basis points")
    parser.add_argument(
        "--exact-out", action="store_true", default=False,
        help="Treat --amount as the output amount",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jupag",
        description="JUPAG - Jupiter swap aggregator client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Quote 0.01 SOL into USDC
  python -m jupag quote --amount 10000000

  # Swap through Ultra (Jupiter lands the transaction)
  python -m jupag ultra --amount 10000000

  # Build the swap locally from instructions and send over RPC
  python -m jupag swap-instructions --amount 10000000

Environment Variables (or use .env file):
  JUPITER_BASE_URL        - API root (default: https://lite-api.jup.ag)
  JUPITER_API_KEY         - Optional: x-api-key for https://api.jup.ag
  SOLANA_RPC_URL          - Your Solana RPC endpoint
  PRIVATE_KEY             - Your wallet's base58-encoded private key
        """,
    )
    parser.add_argument("--log-level", default="INFO", help="Log level (default: INFO)")

    sub = parser.add_subparsers(dest="command", required=True)

    _add_quote_args(sub.add_parser("quote", help="Get a swap quote"))
    _add_trade_args(sub.add_parser("ultra", help="Order and execute through Ultra"))
    _add_quote_args(sub.add_parser("swap", help="Swap with the ready-made transaction"))
    _add_quote_args(sub.add_parser("swap-instructions", help="Swap by assembling instructions"))

    balances = sub.add_parser("balances", help="Token balances of a wallet")
    balances.add_argument("address", nargs="?", help="Wallet address (default: configured wallet)")

    price = sub.add_parser("price", help="USD prices for mints")
    price.add_argument("mints", nargs="+")

    return parser


def _quote_request(args: argparse.Namespace) -> QuoteRequest:
    return QuoteRequest(
        input_mint=args.input_mint,
        output_mint=args.output_mint,
        amount=args.amount,
        slippage_bps=args.slippage_bps,
        swap_mode=SwapMode.EXACT_OUT if args.exact_out else None,
    )


def _wallet(config: ClientConfig) -> WalletManager:
    if not config.private_key:
        raise ConfigError("PRIVATE_KEY is required for this command")
    return WalletManager(config.private_key)


def _print(value) -> None:
    data = TypeAdapter(type(value)).dump_python(value, mode="json", by_alias=True)
    print(json.dumps(data, indent=2))


async def run(args: argparse.Namespace, client: JupiterClient, config: ClientConfig):
    if args.command == "quote":
        _print(await client.get_quote(_quote_request(args)))

    elif args.command == "ultra":
        request = UltraOrderRequest(
            input_mint=args.input_mint,
            output_mint=args.output_mint,
            amount=args.amount,
        )
        _print(await ultra_swap(client, _wallet(config), request))

    elif args.command in ("swap", "swap-instructions"):
        wallet = _wallet(config)
        rpc = SolanaClient(config, client.logger)
        try:
            if args.command == "swap":
                signature = await swap_with_transaction(client, wallet, rpc, _quote_request(args))
            else:
                signature = await swap_with_instructions(client, wallet, rpc, _quote_request(args))
        finally:
            await rpc.close()
        print(signature)

    elif args.command == "balances":
        address = args.address or _wallet(config).get_address()
        _print(await client.get_token_balances(address))

    elif args.command == "price":
        _print(await client.get_tokens_price(args.mints))


async def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = ClientConfig(log_level=args.log_level)
    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Config error: {error}", file=sys.stderr)
        return 2

    logger = JupagLogger(config)
    async with JupiterClient(config, logger) as client:
        try:
            await run(args, client, config)
        except ConfigError as e:
            logger.error(f"{args.command} needs configuration", e)
            return 2
        except JupagError as e:
            logger.error(f"{args.command} failed", e)
            return 1
    return 0


def entrypoint():
    """Console script wrapper."""
    sys.exit(asyncio.run(main()))
