#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from parcllabs import MetricsParams, ParclClient, RateLimitError, RetryPolicy
from parcllabs.models import InvestorHousingStockOwnership


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Compare investor ownership across markets")
    p.add_argument("parcl_ids", nargs="*", type=int, default=[2900187, 2900078, 2899845])
    p.add_argument("--start", default="2024-01-01")
    p.add_argument("--max-retries", type=int, default=5)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    params = MetricsParams(start_date=args.start, limit=100, auto_paginate=True)

    async with ParclClient(retry_policy=RetryPolicy(max_retries=args.max_retries)) as client:
        try:
            ownership = await client.investor_metrics.batch_housing_stock_ownership(
                args.parcl_ids, params
            )
        except RateLimitError as e:
            print(f"Gave up after {e.attempts} attempts: {e.message}")
            return

        latest: dict[int, InvestorHousingStockOwnership] = {}
        for row in ownership.items:
            if row.parcl_id is not None and (
                row.parcl_id not in latest or row.date > latest[row.parcl_id].date
            ):
                latest[row.parcl_id] = row

        print("=" * 48)
        print(f"{'parcl_id':>10} | {'Date':12} | {'Investor owned':>18}")
        print("-" * 48)
        for parcl_id, row in sorted(latest.items()):
            pct = f"{row.investor_owned_pct:.2%}" if row.investor_owned_pct is not None else "-"
            print(f"{parcl_id:>10} | {row.date:12} | {pct:>18}")
        print("=" * 48)
        print(f"Rows fetched : {len(ownership.items)}")
        print(f"Credits used : {client.session_credits_used}")


if __name__ == "__main__":
    asyncio.run(main())
