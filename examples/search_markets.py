#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from parcllabs import LocationType, ParclClient, SearchParams, SortBy, SortOrder


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search Parcl Labs markets")
    p.add_argument("query", nargs="?", default="Los Angeles")
    p.add_argument("--state", default=None, help="State abbreviation, e.g. CA")
    p.add_argument("--location-type", default="ALL", choices=[t.value for t in LocationType])
    p.add_argument("--limit", type=int, default=10)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    params = SearchParams(
        query=args.query,
        state_abbreviation=args.state,
        location_type=LocationType(args.location_type),
        sort_by=SortBy.TOTAL_POPULATION,
        sort_order=SortOrder.DESC,
        limit=args.limit,
    )

    async with ParclClient() as client:
        markets = await client.search.markets(params)

        print("=" * 72)
        print(f"Query   : {args.query}")
        print(f"Matches : {markets.total} (showing {len(markets.items)})")
        print("=" * 72)
        print(f"{'parcl_id':>10} | {'Name':30} | {'Type':8} | {'State':5} | {'Population':>10}")
        print("-" * 72)
        for m in markets.items:
            population = m.total_population if m.total_population is not None else "-"
            print(
                f"{m.parcl_id:>10} | {m.name[:30]:30} | {m.location_type:8} | "
                f"{m.state_abbreviation or '-':5} | {population:>10}"
            )
        print("=" * 72)
        print(f"Credits used: {client.session_credits_used}")


if __name__ == "__main__":
    asyncio.run(main())
