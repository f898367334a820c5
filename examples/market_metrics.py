#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from parcllabs import MetricsParams, ParclClient, PropertyType


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch monthly housing event counts for one market")
    p.add_argument("parcl_id", nargs="?", type=int, default=2900187)
    p.add_argument("--start", default="2023-01-01")
    p.add_argument("--end", default="2024-12-31")
    p.add_argument("--page-size", type=int, default=12)
    p.add_argument(
        "--property-type", default="ALL_PROPERTIES", choices=[t.value for t in PropertyType]
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log every page and retry")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    params = MetricsParams(
        start_date=args.start,
        end_date=args.end,
        limit=args.page_size,
        property_type=PropertyType(args.property_type),
        auto_paginate=True,
    )

    async with ParclClient() as client:
        series = await client.market_metrics.housing_event_counts(args.parcl_id, params)

        print("=" * 52)
        print(f"parcl_id : {series.parcl_id}")
        print(f"Months   : {len(series.items)}")
        print("=" * 52)
        print(f"{'Date':12} | {'Sales':>8} | {'For sale':>10} | {'For rent':>10}")
        print("-" * 52)
        for row in series.items:
            print(
                f"{row.date:12} | {row.sales or 0:>8} | "
                f"{row.new_listings_for_sale or 0:>10} | {row.new_rental_listings or 0:>10}"
            )
        print("=" * 52)
        usage = client.account_info()
        print(f"Credits used: {usage.est_session_credits_used}")
        print(f"Remaining   : {usage.est_remaining_credits}")


if __name__ == "__main__":
    asyncio.run(main())
