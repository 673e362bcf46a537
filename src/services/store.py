"""In-memory entity store: users, properties, appointments and agents keyed by integer IDs."""

import threading
from typing import Optional, Any
from src.models.user import User
from src.models.property import Property
from src.models.appointment import Appointment
from src.models.agent import Agent
from src.utils.config import AppConfig
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

SEED_AGENTS = [
    {
        "name": "Sarah Johnson",
        "specialization": "Luxury Home Specialist",
        "rating": 4.8,
        "properties_sold": 200,
        "image_url": "/agent1.jpg",
    },
    {
        "name": "Michael Rodriguez",
        "specialization": "First-time Buyer Expert",
        "rating": 5.0,
        "properties_sold": 150,
        "image_url": "/agent2.jpg",
    },
    {
        "name": "Emily Chen",
        "specialization": "Investment Property Specialist",
        "rating": 4.2,
        "properties_sold": 120,
        "image_url": "/agent3.jpg",
    },
    {
        "name": "David Williams",
        "specialization": "Commercial Real Estate",
        "rating": 4.7,
        "properties_sold": 180,
        "image_url": "/agent4.jpg",
    },
]

# Fields the store assigns; callers cannot overwrite them through updates.
_IMMUTABLE_FIELDS = frozenset({"id", "created_at"})


class MemoryStore:
    """
    Map-based store with one monotonically increasing counter per collection.

    Construct one per application and pass it to services. `lock` is held
    around read-modify-write sequences so concurrent requests cannot lose
    updates.
    """

    def __init__(self, seed_agents: Optional[bool] = None):
        self.users: dict[int, User] = {}
        self.properties: dict[int, Property] = {}
        self.appointments: dict[int, Appointment] = {}
        self.agents: dict[int, Agent] = {}
        self._next_ids = {"users": 1, "properties": 1, "appointments": 1, "agents": 1}
        self.lock = threading.RLock()

        if seed_agents is None:
            seed_agents = AppConfig.SEED_AGENTS
        if seed_agents:
            for agent_data in SEED_AGENTS:
                self.create_agent(agent_data)

        logger.debug(
            "MemoryStore initialized",
            seeded_agents=len(self.agents)
        )

    def _allocate_id(self, collection: str) -> int:
        with self.lock:
            new_id = self._next_ids[collection]
            self._next_ids[collection] = new_id + 1
            return new_id

    @staticmethod
    def _merge(record, updates: dict[str, Any]):
        """Return a validated copy of record with updates applied."""
        clean = {k: v for k, v in updates.items() if k not in _IMMUTABLE_FIELDS}
        merged = record.model_dump()
        merged.update(clean)
        return type(record).model_validate(merged)

    # Users
    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.username == username), None)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    def create_user(self, user_data: dict[str, Any]) -> User:
        with self.lock:
            user = User(id=self._allocate_id("users"), **user_data)
            self.users[user.id] = user
        return user

    def update_user(self, user_id: int, updates: dict[str, Any]) -> Optional[User]:
        with self.lock:
            existing = self.users.get(user_id)
            if existing is None:
                return None
            updated = self._merge(existing, updates)
            self.users[user_id] = updated
            return updated

    # Properties
    def get_property(self, property_id: int) -> Optional[Property]:
        return self.properties.get(property_id)

    def list_properties(self) -> list[Property]:
        """All properties in insertion order."""
        return list(self.properties.values())

    def create_property(self, property_data: dict[str, Any]) -> Property:
        with self.lock:
            prop = Property(id=self._allocate_id("properties"), **property_data)
            self.properties[prop.id] = prop
        return prop

    def update_property(self, property_id: int, updates: dict[str, Any]) -> Optional[Property]:
        with self.lock:
            existing = self.properties.get(property_id)
            if existing is None:
                return None
            updated = self._merge(existing, updates)
            self.properties[property_id] = updated
            return updated

    def delete_property(self, property_id: int) -> bool:
        with self.lock:
            return self.properties.pop(property_id, None) is not None

    # Appointments
    def get_appointment(self, appointment_id: int) -> Optional[Appointment]:
        return self.appointments.get(appointment_id)

    def list_appointments_by_user(self, user_id: int) -> list[Appointment]:
        return [a for a in self.appointments.values() if a.user_id == user_id]

    def list_appointments_by_property(self, property_id: int) -> list[Appointment]:
        return [a for a in self.appointments.values() if a.property_id == property_id]

    def create_appointment(self, appointment_data: dict[str, Any]) -> Appointment:
        with self.lock:
            appointment = Appointment(id=self._allocate_id("appointments"), **appointment_data)
            self.appointments[appointment.id] = appointment
        return appointment

    def update_appointment(self, appointment_id: int, updates: dict[str, Any]) -> Optional[Appointment]:
        with self.lock:
            existing = self.appointments.get(appointment_id)
            if existing is None:
                return None
            updated = self._merge(existing, updates)
            self.appointments[appointment_id] = updated
            return updated

    # Agents
    def get_agent(self, agent_id: int) -> Optional[Agent]:
        return self.agents.get(agent_id)

    def list_agents(self) -> list[Agent]:
        return list(self.agents.values())

    def create_agent(self, agent_data: dict[str, Any]) -> Agent:
        with self.lock:
            agent = Agent(id=self._allocate_id("agents"), **agent_data)
            self.agents[agent.id] = agent
        return agent

    def snapshot(self) -> dict[str, dict[str, dict]]:
        """JSON-safe dump of every collection keyed by stringified ID."""
        with self.lock:
            return {
                name: {str(k): v.model_dump(mode="json") for k, v in collection.items()}
                for name, collection in (
                    ("users", self.users),
                    ("properties", self.properties),
                    ("appointments", self.appointments),
                    ("agents", self.agents),
                )
            }
