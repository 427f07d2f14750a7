#!/usr/bin/env python3
"""
CLI for the LDO Delegate Toolkit.

Fetches the voters delegating to a Lido DAO delegate and ranks them by
voting power.

Examples:
  - Current voting power of the default delegate
    ldo-delegate

  - Voting power at a past vote, saved as JSON
    ldo-delegate --vote-id 180 --delegate-address 0x... --json

  - Custom RPC and smaller batches
    RPC_URL=https://... ldo-delegate --page-size 50 --chunk-size 50 --concurrency 2
"""

import argparse
import asyncio
from typing import List, Optional

from ldo_delegate_toolkit import __version__
from ldo_delegate_toolkit.commands.helpers import handle_command_error
from ldo_delegate_toolkit.shared.config import ToolkitConfig
from ldo_delegate_toolkit.shared.constants import (
    LidoConstants,
    PipelineDefaults,
    RpcConstants,
)
from ldo_delegate_toolkit.shared.logging import set_log_level
from ldo_delegate_toolkit.shared.services.web3_service import Web3Service
from ldo_delegate_toolkit.shared.types import RankedResult
from ldo_delegate_toolkit.utils.formatters import (
    console,
    create_voters_table,
    format_exact,
    format_human,
    generate_timestamped_filename,
    redact_rpc_url,
    save_json_output,
)
from ldo_delegate_toolkit.voting.reader import LidoVotingReader
from ldo_delegate_toolkit.voting.service import VotingPowerService


def _config_from_args(args: argparse.Namespace) -> ToolkitConfig:
    return ToolkitConfig(
        rpc_url=args.rpc_url,
        contract_address=args.contract_address,
        delegate_address=args.delegate_address,
        vote_id=args.vote_id,
        page_size=args.page_size,
        chunk_size=args.chunk_size,
        concurrency=args.concurrency,
        rpc_timeout=RpcConstants.get_timeout(),
        quiet=args.quiet,
    ).validate()


async def compute_ranking(config: ToolkitConfig) -> RankedResult:
    """Build the contract reader from config and run the ranking."""
    web3_service = Web3Service(config.rpc_url, timeout=config.rpc_timeout)
    reader = LidoVotingReader(web3_service, config.contract_address)
    service = VotingPowerService(reader)
    return await service.compute_ranking(
        config.delegate_address,
        vote_id=config.vote_id,
        page_size=config.page_size,
        chunk_size=config.chunk_size,
        concurrency=config.concurrency,
    )


def render_ranking(result: RankedResult, config: ToolkitConfig) -> None:
    symbol = LidoConstants.TOKEN_SYMBOL

    console.print()
    console.rule()
    if result.vote_id is None:
        console.print("[bold]CURRENT VOTING POWER[/bold]")
    else:
        console.print(f"[bold]VOTING POWER AT VOTE #{result.vote_id}[/bold]")
    console.rule()

    if result.active:
        console.print()
        console.print(
            f"[bold green]ACTIVE VOTERS[/bold green] "
            f"({len(result.active)} addresses)"
        )
        table = create_voters_table(symbol)
        for i, entry in enumerate(result.active, start=1):
            table.add_row(
                f"#{i}",
                entry.address,
                format_human(entry.power, config.decimals),
            )
        console.print(table)

    if result.inactive:
        console.print()
        console.print(
            f"[dim]INACTIVE: {len(result.inactive)} addresses "
            f"with 0 {symbol}[/dim]"
        )

    console.print()
    console.rule(characters="═")
    console.print(
        f"[bold]TOTAL VOTING POWER:[/bold]  "
        f"{format_human(result.total_power, config.decimals)} {symbol}"
    )
    console.print(
        f"Full precision:      "
        f"{format_exact(result.total_power, config.decimals)} {symbol}"
    )
    console.rule(characters="═")


def cmd_rank(args: argparse.Namespace) -> None:
    config = _config_from_args(args)

    if config.quiet:
        set_log_level("WARNING")
    else:
        console.print(f"RPC: {redact_rpc_url(config.rpc_url)}")
        console.print(f"Contract: {config.contract_address}")
        console.print(f"Delegate: {config.delegate_address}")

    result = asyncio.run(compute_ranking(config))
    render_ranking(result, config)

    if args.json:
        output = {
            "delegate": config.delegate_address,
            "contract": config.contract_address,
            "decimals": config.decimals,
            **result.to_dict(),
        }
        filename = args.output or generate_timestamped_filename(
            "delegate_voting_power"
        )
        save_json_output(output, filename)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ldo-delegate",
        description="Fetch delegated voters sorted by voting power",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-v",
        "--vote-id",
        type=int,
        help="Vote ID to query historical voting power at "
        "(default: current voting power)",
    )
    parser.add_argument(
        "-d",
        "--delegate-address",
        type=str,
        default=LidoConstants.DEFAULT_DELEGATE,
    )
    parser.add_argument(
        "--rpc-url",
        type=str,
        default=RpcConstants.get_rpc_url(),
        help="Ethereum RPC URL (can also be provided via RPC_URL / .env)",
    )
    parser.add_argument(
        "--contract-address",
        type=str,
        default=LidoConstants.VOTING_CONTRACT,
        help="Lido Voting contract address (Ethereum mainnet)",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=PipelineDefaults.PAGE_SIZE,
        help="Page size for getDelegatedVoters calls",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=PipelineDefaults.CHUNK_SIZE,
        help="Chunk size for voting power calls",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=PipelineDefaults.CONCURRENCY,
        help="Concurrent requests for voting power fetching",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress logging (results still printed)",
    )
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("--output", type=str, help="Output filename")
    parser.set_defaults(func=cmd_rank)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except Exception as e:
        handle_command_error(e)


if __name__ == "__main__":
    main()
