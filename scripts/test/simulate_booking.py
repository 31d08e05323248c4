# scripts/test/simulate_booking.py
"""
Fire concurrent reservation requests at a running backend.
Useful for checking by hand that a cab is never booked twice.

Usage: python scripts/test/simulate_booking.py --cab 1 --users 1 2 3 4 --repeat 3
"""

import argparse
import asyncio
import httpx

BACKEND_URL = "http://127.0.0.1:4000/api/v1"


async def reserve(client: httpx.AsyncClient, user_id: int, cab_id: int):
    resp = await client.post(f"{BACKEND_URL}/bookings", json={
        "UserID": user_id,
        "CabID": cab_id,
        "StartLocation": "Depot",
        "EndLocation": "Airport",
    })
    return user_id, resp.status_code, resp.json()


async def main(cab_id: int, user_ids, repeat: int, api_key: str = None):
    headers = {"X-API-Key": api_key} if api_key else {}
    async with httpx.AsyncClient(headers=headers, timeout=10) as client:
        tasks = [reserve(client, uid, cab_id) for uid in user_ids for _ in range(repeat)]
        results = await asyncio.gather(*tasks)

    created = [r for r in results if r[1] == 201]
    for user_id, code, body in results:
        detail = body.get("id") if code == 201 else body.get("error")
        print(f"user={user_id} → HTTP {code}: {detail}")
    print(f"\n{len(created)} of {len(results)} requests booked cab {cab_id}")
    if len(created) > 1:
        print("❌ cab booked more than once")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Concurrent reservation smoke test")
    parser.add_argument("--cab", type=int, default=1)
    parser.add_argument("--users", type=int, nargs="+", default=[1])
    parser.add_argument("--repeat", type=int, default=5)
    parser.add_argument("--url", default=BACKEND_URL)
    parser.add_argument("--api-key", default=None)
    args = parser.parse_args()

    BACKEND_URL = args.url
    asyncio.run(main(args.cab, args.users, args.repeat, args.api_key))
