"""
Locust Load Test Suite

Run scenarios:
  locust -f locustfile.py --tags race     # Race for the open seat
  locust -f locustfile.py --tags board    # Status polling throughput
  locust -f locustfile.py --tags edge     # Test bad input
  locust -f locustfile.py                 # All tests
"""

import random
import string
import requests
from locust import HttpUser, task, between, tag, events


def random_nickname():
    return "u_" + "".join(random.choices(string.ascii_lowercase, k=8))


@events.test_start.add_listener
def on_test_start(environment, **kwargs):
    """Setup: Start every run from an empty ledger."""
    print("\n" + "="*60)
    print("SETUP: Resetting booking ledger...")
    print("="*60)
    if environment.host:
        requests.post(f"{environment.host}/api/reset", timeout=5)


class RacingUser(HttpUser):
    """
    TEST 1: Race - many users -> one open seat per cycle

    Run: locust -f locustfile.py --tags race -u 200 -r 50 --run-time 120s

    After test, verify:
      GET /api/bookings
    Every seatId should appear at most once.
    """
    wait_time = between(0.05, 0.2)

    def on_start(self):
        self.nickname = random_nickname()

    @tag("race")
    @task
    def poll_and_claim(self):
        """Poll the board; when a seat is open, try to claim it."""
        resp = self.client.get("/api/seats", name="/api/seats [race]")
        if resp.status_code != 200:
            return

        current = resp.json().get("currentOpen")
        if not current:
            return

        with self.client.post("/api/book",
            json={"nickname": self.nickname, "seatId": current["seat"]},
            catch_response=True
        ) as book_resp:
            if book_resp.status_code == 200:
                book_resp.success()  # Won or lost the race, both expected
            else:
                book_resp.failure(f"Unexpected: {book_resp.status_code}")


class BoardWatcher(HttpUser):
    """
    TEST 2: Throughput - status board polling

    Run: locust -f locustfile.py --tags board -u 100 -r 20 --run-time 60s

    Compare:
      - Avg response time
      - Requests/sec
      - P95/P99 latency
    """
    wait_time = between(0.1, 0.5)

    @tag("board", "read")
    @task(10)
    def poll_board(self):
        self.client.get("/api/seats")

    @tag("board", "read")
    @task(3)
    def view_history(self):
        self.client.get("/api/bookings")

    @tag("board")
    @task(1)
    def health_check(self):
        self.client.get("/health")


class EdgeCaseUser(HttpUser):
    """
    TEST 3: Edge cases - Bad input handling

    Run: locust -f locustfile.py --tags edge -u 20 -r 5 --run-time 30s

    System should NOT crash, return proper error codes.
    """
    wait_time = between(0.5, 1.5)

    def _expect(self, resp, allowed):
        if resp.status_code in allowed:
            resp.success()
        else:
            resp.failure(f"Expected {allowed}, got {resp.status_code}")

    @tag("edge")
    @task
    def missing_nickname(self):
        with self.client.post("/api/book",
            json={"seatId": "A1"},
            catch_response=True
        ) as resp:
            self._expect(resp, [400])

    @tag("edge")
    @task
    def unknown_seat(self):
        """Seat outside the grid is never open."""
        with self.client.post("/api/book",
            json={"nickname": random_nickname(), "seatId": "Z99"},
            catch_response=True
        ) as resp:
            if resp.status_code == 200 and resp.json().get("success") is False:
                resp.success()
            else:
                resp.failure(f"Expected rejection, got {resp.status_code}")

    @tag("edge")
    @task
    def malformed_json(self):
        """Send garbage data."""
        with self.client.post("/api/book",
            data="not json at all",
            headers={"Content-Type": "application/json"},
            catch_response=True
        ) as resp:
            self._expect(resp, [400])

    @tag("edge")
    @task
    def unknown_route(self):
        with self.client.get("/api/does-not-exist",
            catch_response=True
        ) as resp:
            self._expect(resp, [404])
