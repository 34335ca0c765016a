"""Communicable events and recipient contracts.

A communicable event is raised by a domain action that should notify people
(e.g. a team invitation was sent). Its name is the trigger that communication
template groups are matched against.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class CommunicableEvent(Protocol):
    """Contract for events that trigger communications."""

    def get_params(self) -> dict[str, Any]:
        """Template parameters carried by the event."""
        ...

    def get_communicables(self) -> list[Any]:
        """Recipients to notify."""
        ...

    @classmethod
    def get_name(cls) -> str:
        """Trigger name matched against communication template groups."""
        ...


@dataclass
class BaseCommunicableEvent:
    """Dataclass base for communicable events.

    Subclasses set trigger_name to pin the trigger; otherwise the class name is used.
    """

    params: dict[str, Any] = field(default_factory=dict)
    communicables: list[Any] = field(default_factory=list)

    trigger_name: ClassVar[str | None] = None

    def get_params(self) -> dict[str, Any]:
        return dict(self.params)

    def get_communicables(self) -> list[Any]:
        return list(self.communicables)

    @classmethod
    def get_name(cls) -> str:
        return cls.trigger_name or cls.__name__


@runtime_checkable
class EmailCommunicable(Protocol):
    """Recipient reachable by email."""

    def get_email(self) -> str: ...


@runtime_checkable
class SmsCommunicable(Protocol):
    """Recipient reachable by SMS."""

    def get_phone(self) -> str: ...


@runtime_checkable
class DatabaseCommunicable(Protocol):
    """Recipient that receives in-app (database) notifications."""

    def get_notifiable_id(self) -> str: ...


@dataclass(frozen=True)
class Recipient:
    """Plain recipient implementing every communicable contract it has data for."""

    user_id: str
    email: str
    phone: str | None = None

    def get_email(self) -> str:
        return self.email

    def get_phone(self) -> str:
        return self.phone or ""

    def get_notifiable_id(self) -> str:
        return self.user_id


@lru_cache(maxsize=256)
def event_type_for_trigger(trigger: str) -> type[BaseCommunicableEvent]:
    """Event class whose name is trigger, for events raised outside this codebase (e.g. over HTTP)."""
    return type(f"{trigger}Event", (BaseCommunicableEvent,), {"trigger_name": trigger})
