import random
from datetime import date, timedelta

from locust import HttpUser, between, task


class ResortGuest(HttpUser):
    """
    Many guests competing for the same rooms and event slots.

    409 responses are the expected outcome of losing a race and are counted
    as successes; anything else non-2xx is a failure.
    """

    wait_time = between(0.1, 0.5)

    def on_start(self):
        self.user_id = str(random.randint(1, 10_000))
        self.headers = {"X-User-Id": self.user_id, "Content-Type": "application/json"}

    def _stay(self) -> tuple[str, str]:
        check_in = date.today() + timedelta(days=random.randint(1, 30))
        check_out = check_in + timedelta(days=random.randint(1, 4))
        return check_in.isoformat(), check_out.isoformat()

    @task(3)
    def search_rooms(self):
        date_from, date_to = self._stay()
        self.client.get(
            "/api/rooms/search",
            params={"from": date_from, "to": date_to, "guests": 2},
            name="/api/rooms/search",
        )

    @task(2)
    def book_room(self):
        date_from, date_to = self._stay()
        payload = {
            "room_type": random.choice(["Standard", "Deluxe", "Suite"]),
            "from": date_from,
            "to": date_to,
            "adults": 2,
            "children": 0,
            "first_name": "Load",
            "last_name": "Tester",
        }
        with self.client.post(
            "/api/rooms/book",
            json=payload,
            headers=self.headers,
            name="/api/rooms/book",
            catch_response=True,
        ) as response:
            if response.status_code in (201, 409):
                response.success()

    @task(2)
    def signup_for_event(self):
        payload = {
            "slot_id": 1,
            "party_size": random.randint(1, 3),
            "first_name": "Load",
            "last_name": "Tester",
        }
        with self.client.post(
            "/api/events/1/signup",
            json=payload,
            headers=self.headers,
            name="/api/events/[id]/signup",
            catch_response=True,
        ) as response:
            if response.status_code in (201, 409):
                response.success()

    @task(1)
    def dashboard(self):
        self.client.get("/api/user/dashboard", headers=self.headers, name="/api/user/dashboard")
