"""
Content Update Notifier for pagecms.

Fans out a "section updated" event to subscribers after a section
translation has been committed. Delivery is best-effort: a failing
subscriber is logged and skipped, and never affects the stored content.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from pagecms.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SectionUpdateEvent:
    """Payload delivered to subscribers."""

    section_id: str
    language: str
    content: dict[str, Any] = field(default_factory=dict)
    type: str = "SECTION_UPDATE"


class Subscriber(Protocol):
    def update(self, event: SectionUpdateEvent) -> None: ...


@runtime_checkable
class IdentifiedSubscriber(Subscriber, Protocol):
    def identity(self) -> str: ...


class Mailer(Protocol):
    def send(self, to: str, subject: str, body: str) -> None: ...


def _key(subscriber: Subscriber) -> Any:
    if isinstance(subscriber, IdentifiedSubscriber):
        return subscriber.identity()
    return id(subscriber)


class ContentUpdateSubject:
    """
    Ordered list of distinct subscribers.

    Subscribers exposing identity() are deduplicated by that value,
    others by object identity.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> bool:
        """Add a subscriber. Returns False if an equal one is already registered."""
        key = _key(subscriber)
        if any(_key(s) == key for s in self._subscribers):
            return False
        self._subscribers.append(subscriber)
        return True

    def unsubscribe(self, subscriber: Subscriber) -> bool:
        key = _key(subscriber)
        for index, existing in enumerate(self._subscribers):
            if _key(existing) == key:
                del self._subscribers[index]
                return True
        return False

    def subscribers(self) -> list[Subscriber]:
        return list(self._subscribers)

    def publish(self, event: SectionUpdateEvent) -> int:
        """
        Deliver an event to every subscriber in subscription order.

        Args:
            event: The update event

        Returns:
            Number of subscribers that accepted the event
        """
        delivered = 0
        for subscriber in list(self._subscribers):
            try:
                subscriber.update(event)
                delivered += 1
            except Exception:
                logger.exception(f"Subscriber {_key(subscriber)} failed for section {event.section_id}")
        return delivered


class LoggingMailer:
    """Mailer that records messages in the log instead of sending them."""

    def send(self, to: str, subject: str, body: str) -> None:
        logger.info(f"Mail to {to}: {subject}")
        logger.debug(body)


class EmailNotificationSubscriber:
    """Sends a notification message to a CMS user on every update."""

    def __init__(self, user: User, mailer: Mailer):
        self.user = user
        self.mailer = mailer

    def identity(self) -> str:
        return str(self.user.id)

    def update(self, event: SectionUpdateEvent) -> None:
        self.mailer.send(
            self.user.email,
            "Content Update Notification",
            self.format_message(event),
        )

    def format_message(self, event: SectionUpdateEvent) -> str:
        return (
            f"Hello {self.user.name},\n\n"
            f"Section {event.section_id} was updated in language '{event.language}'.\n"
            f"Updated fields: {', '.join(sorted(k for k in event.content if not k.startswith('_'))) or '-'}\n"
        )


class ContentUpdateManager:
    """Manages user subscriptions to content updates."""

    def __init__(self, subject: ContentUpdateSubject | None = None, mailer: Mailer | None = None):
        self.subject = subject or ContentUpdateSubject()
        self.mailer = mailer or LoggingMailer()

    def subscribe_user(self, user: User) -> bool:
        added = self.subject.subscribe(EmailNotificationSubscriber(user, self.mailer))
        if added:
            logger.info(f"User {user.id} subscribed to content updates")
        return added

    def unsubscribe_user(self, user: User) -> bool:
        removed = self.subject.unsubscribe(EmailNotificationSubscriber(user, self.mailer))
        if removed:
            logger.info(f"User {user.id} unsubscribed from content updates")
        return removed

    def notify_content_update(self, section_id: Any, language: str, content: dict[str, Any]) -> int:
        event = SectionUpdateEvent(section_id=str(section_id), language=language, content=content)
        delivered = self.subject.publish(event)
        logger.info(f"Section {section_id} update delivered to {delivered} subscribers")
        return delivered
