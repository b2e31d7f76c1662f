"""
Persistence service: the single source of truth for all mutable records.

An in-memory DatabaseSchema mirrored to a KeyValueStore. Every mutator changes
the mirror and then writes the whole document before returning, under one
lock, so concurrent requests cannot write an older document over a newer one.
There is no transaction spanning two mutator calls.
"""
from __future__ import annotations
import logging
import threading
import time
from typing import List, Optional

from fastapi import Request

from .schemas import (
    ClientProfile,
    DatabaseSchema,
    FoodLog,
    MeasurementLog,
    User,
    UserRole,
    WeightLog,
    Workout,
)
from .security import get_password_hash, verify_password
from .storage import KeyValueStore
from . import seed

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "titanfit_db_v1"


def new_id() -> str:
    """Millisecond timestamp id; two ids created in the same millisecond collide."""
    return str(int(time.time() * 1000))


class FitnessStore:
    def __init__(self, storage: KeyValueStore, storage_key: str = DEFAULT_STORAGE_KEY):
        self.storage = storage
        self.storage_key = storage_key
        self._lock = threading.Lock()
        stored = storage.get_item(storage_key)
        self.data = DatabaseSchema.model_validate_json(stored) if stored else DatabaseSchema()

    def _save(self) -> None:
        self.storage.set_item(
            self.storage_key,
            self.data.model_dump_json(by_alias=True, exclude_none=True),
        )

    def initialize(self, coach_username: str = "rushi", coach_password: str = "rushi9001") -> None:
        """Seed the store unless credentials already exist."""
        with self._lock:
            if self.data.credentials:
                return
            logger.info("Seeding database under key %s", self.storage_key)

            self.data.credentials = {coach_username: get_password_hash(coach_password)}
            self.data.users = [seed.seed_coach(coach_username)]
            self.data.clients = seed.seed_clients()
            self.data.food_logs = seed.seed_food_logs()
            self.data.weight_logs = seed.seed_weight_logs()
            self.data.workouts = seed.seed_workouts()
            self.data.measurements = seed.seed_measurements()

            self._save()

    def flush(self) -> None:
        with self._lock:
            self._save()

    def authenticate(self, identifier: str, secret: str, role: UserRole) -> Optional[User]:
        if role == UserRole.COACH:
            stored_hash = self.data.credentials.get(identifier)
            if not stored_hash or not verify_password(secret, stored_hash):
                return None
            return next(
                (u for u in self.data.users if u.username == identifier and u.role == UserRole.COACH),
                None,
            )

        # Clients sign in with username + passport code, compared verbatim
        client = next(
            (c for c in self.data.clients if c.username == identifier and c.passport_code == secret),
            None,
        )
        if client is None:
            return None
        return User(
            id=client.id,
            name=client.name,
            username=client.username,
            role=UserRole.CLIENT,
            avatar_url=client.avatar_url,
        )

    # --- Getters ---

    def get_users(self) -> List[User]:
        return list(self.data.users)

    def get_user(self, user_id: str) -> Optional[User]:
        return next((u for u in self.data.users if u.id == user_id), None)

    def get_clients(self) -> List[ClientProfile]:
        return list(self.data.clients)

    def get_client(self, client_id: str) -> Optional[ClientProfile]:
        return next((c for c in self.data.clients if c.id == client_id), None)

    def get_food_logs(self) -> List[FoodLog]:
        return list(self.data.food_logs)

    def get_weight_logs(self) -> List[WeightLog]:
        return list(self.data.weight_logs)

    def get_workouts(self) -> List[Workout]:
        return list(self.data.workouts)

    def get_workout(self, workout_id: str) -> Optional[Workout]:
        return next((w for w in self.data.workouts if w.id == workout_id), None)

    def get_measurements(self) -> List[MeasurementLog]:
        return list(self.data.measurements)

    # --- Mutators ---
    # Each holds the lock across the in-memory change and the write so that
    # documents reach storage in the order the changes were made.

    def add_client(self, client: ClientProfile) -> None:
        with self._lock:
            self.data.clients.append(client)
            self._save()

    def update_client(self, client: ClientProfile) -> None:
        with self._lock:
            self.data.clients = [client if c.id == client.id else c for c in self.data.clients]
            self._save()

    def add_food_log(self, log: FoodLog) -> None:
        with self._lock:
            self.data.food_logs.insert(0, log)  # newest first
            self._save()

    def delete_food_log(self, log_id: str) -> None:
        with self._lock:
            self.data.food_logs = [log for log in self.data.food_logs if log.id != log_id]
            self._save()

    def add_weight_log(self, log: WeightLog) -> None:
        """Append the log and make it the owning client's current weight, in one write."""
        with self._lock:
            self.data.weight_logs.append(log)
            client = self.get_client(log.client_id)
            if client is not None:
                client.current_weight_kg = log.weight_kg
            self._save()

    def add_measurement(self, log: MeasurementLog) -> None:
        with self._lock:
            self.data.measurements.append(log)
            self._save()

    def add_workout(self, workout: Workout) -> None:
        with self._lock:
            self.data.workouts.append(workout)
            self._save()

    def update_workout(self, workout: Workout) -> None:
        with self._lock:
            self.data.workouts = [workout if w.id == workout.id else w for w in self.data.workouts]
            self._save()


def get_store(request: Request) -> FitnessStore:
    """FastAPI dependency returning the store built at application startup."""
    return request.app.state.store
