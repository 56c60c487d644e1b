#!/usr/bin/env python3
"""
Seat race stress test for the Ticketing Race Simulator.
Waits for the next open window, then fires concurrent claims at the open
seat to verify that exactly one wins.
"""

import asyncio
import aiohttp
import time
from typing import Optional

API_URL = "http://localhost:3000"
CONCURRENT_USERS = 50
POLL_INTERVAL = 0.05


class StressTest:
    def __init__(self):
        self.results = {
            "successful_bookings": 0,
            "rejected_bookings": 0,
            "failed_bookings": 0,
            "errors": 0,
            "response_times": []
        }
        self.seat_id: Optional[str] = None

    async def wait_for_open_seat(self, session: aiohttp.ClientSession, timeout: float = 25.0):
        """Poll /api/seats until a seat opens (one cycle is 20s)."""
        deadline = time.time() + timeout
        while time.time() < deadline:
            async with session.get(f"{API_URL}/api/seats") as resp:
                data = await resp.json()
                current = data.get("currentOpen")
                if current:
                    self.seat_id = current["seat"]
                    remaining = current["closeTime"] - data["timestamp"]
                    print(f"✓ Seat {self.seat_id} open, {remaining}ms left in window")
                    return
            await asyncio.sleep(POLL_INTERVAL)

    async def book_seat(self, session: aiohttp.ClientSession, user_num: int):
        """Attempt to claim the open seat."""
        start = time.time()

        try:
            async with session.post(f"{API_URL}/api/book",
                json={"nickname": f"racer_{user_num}", "seatId": self.seat_id}
            ) as resp:
                elapsed = (time.time() - start) * 1000
                self.results["response_times"].append(elapsed)
                data = await resp.json()

                if resp.status == 200 and data.get("success"):
                    self.results["successful_bookings"] += 1
                    print(f"✓ User {user_num} won seat {self.seat_id} ({elapsed:.0f}ms)")
                elif resp.status == 200:
                    self.results["rejected_bookings"] += 1
                    print(f"✗ User {user_num} lost: {data.get('message')} ({elapsed:.0f}ms)")
                else:
                    self.results["failed_bookings"] += 1
                    print(f"✗ User {user_num} failed: {resp.status} ({elapsed:.0f}ms)")
        except Exception as e:
            self.results["errors"] += 1
            print(f"✗ User {user_num} error: {e}")

    async def run(self):
        """Execute the stress test."""
        print(f"\n{'='*60}")
        print(f"STRESS TEST: {CONCURRENT_USERS} users → 1 open seat")
        print(f"{'='*60}\n")

        async with aiohttp.ClientSession() as session:
            print("Phase 1: Resetting ledger...")
            await session.post(f"{API_URL}/api/reset")

            print("Phase 2: Waiting for a seat to open...")
            await self.wait_for_open_seat(session)
            if not self.seat_id:
                print("✗ No seat opened")
                return
            print()

            print(f"Phase 3: {CONCURRENT_USERS} users claiming simultaneously...")
            print("-" * 60)
            start_time = time.time()

            booking_tasks = [self.book_seat(session, i) for i in range(CONCURRENT_USERS)]
            await asyncio.gather(*booking_tasks)

            total_time = time.time() - start_time

            async with session.get(f"{API_URL}/api/bookings") as resp:
                bookings = (await resp.json())["bookings"]

            # Results
            print("\n" + "="*60)
            print("RESULTS")
            print("="*60)
            print(f"Total time:          {total_time:.2f}s")
            print(f"Successful bookings: {self.results['successful_bookings']}")
            print(f"Rejected (lost):     {self.results['rejected_bookings']}")
            print(f"Failed bookings:     {self.results['failed_bookings']}")
            print(f"Errors:              {self.results['errors']}")

            if self.results["response_times"]:
                times = sorted(self.results["response_times"])
                print(f"\nResponse times:")
                print(f"  Avg: {sum(times)/len(times):.0f}ms")
                print(f"  P50: {times[len(times)//2]:.0f}ms")
                print(f"  P95: {times[int(len(times)*0.95)]:.0f}ms")
                print(f"  P99: {times[int(len(times)*0.99)]:.0f}ms")

            # Verify no double booking
            holders = [b for b in bookings if b["seatId"] == self.seat_id]
            print("\n" + "="*60)
            if self.results["successful_bookings"] <= 1 and len(holders) <= 1:
                print(f"✓ PASS: No double booking detected!")
                print(f"  {len(holders)} holder(s) for seat {self.seat_id}")
            else:
                print(f"✗ FAIL: DOUBLE BOOKING DETECTED!")
                print(f"  {len(holders)} holders for seat {self.seat_id}")
            print("="*60 + "\n")

if __name__ == "__main__":
    test = StressTest()
    asyncio.run(test.run())
