import os

from locust import HttpUser, between, task

CAR_ID = int(os.getenv("LOAD_CAR_ID", "1"))
CLIENT_ID = int(os.getenv("LOAD_CLIENT_ID", "1"))
EMPLOYEE_ID = int(os.getenv("LOAD_EMPLOYEE_ID", "1"))


class APIUser(HttpUser):
    # Wait between 1 and 3 seconds between tasks
    wait_time = between(1, 3)

    def on_start(self):
        """
        Called when a Locust user starts.
        Every user competes for the same car and dates.
        """
        self.payload = {
            "car_id": CAR_ID,
            "client_id": CLIENT_ID,
            "employee_id": EMPLOYEE_ID,
            "start_date": os.getenv("LOAD_START_DATE", "2030-06-01"),
            "end_date": os.getenv("LOAD_END_DATE", "2030-06-05"),
            "total_cost": "500.00",
        }

    @task
    def create_rental(self):
        """
        Only one request per period may succeed; a 409 is the expected outcome
        for the rest and is not counted as a failure.
        """
        with self.client.post(
            "/api/v1/rentals",
            json=self.payload,
            name="/api/v1/rentals",
            catch_response=True,
        ) as response:
            if response.status_code in (201, 409):
                response.success()
            else:
                response.failure(f"Unexpected status {response.status_code}")
