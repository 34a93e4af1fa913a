"""
Tests for the content update notifier.
"""

import logging
import uuid
from unittest.mock import MagicMock

from pagecms.models.user import User
from pagecms.services.content_notifier import (
    ContentUpdateManager,
    ContentUpdateSubject,
    EmailNotificationSubscriber,
    SectionUpdateEvent,
)


class Recorder:
    """Subscriber without identity(); deduplicated by object identity."""

    def __init__(self, log, name):
        self.log = log
        self.name = name

    def update(self, event):
        self.log.append((self.name, event.section_id))


class Named(Recorder):
    def identity(self):
        return self.name


class Exploding:
    def update(self, event):
        raise RuntimeError("mail server down")


def make_user(name="Ada") -> User:
    return User(id=uuid.uuid4(), email=f"{name.lower()}@example.com", name=name, role="ADMIN", is_active=True)


EVENT = SectionUpdateEvent(section_id="s1", language="en", content={"title": "Hi", "_type": "HERO"})


class TestContentUpdateSubject:
    """Fan-out, ordering and deduplication."""

    def test_publish_in_subscription_order(self):
        log = []
        subject = ContentUpdateSubject()
        for name in ("a", "b", "c"):
            subject.subscribe(Recorder(log, name))

        delivered = subject.publish(EVENT)

        assert delivered == 3
        assert log == [("a", "s1"), ("b", "s1"), ("c", "s1")]

    def test_dedup_by_identity(self):
        log = []
        subject = ContentUpdateSubject()

        assert subject.subscribe(Named(log, "x")) is True
        assert subject.subscribe(Named(log, "x")) is False
        assert len(subject.subscribers()) == 1

    def test_dedup_by_object(self):
        log = []
        subject = ContentUpdateSubject()
        recorder = Recorder(log, "x")

        subject.subscribe(recorder)
        subject.subscribe(recorder)
        subject.subscribe(Recorder(log, "x"))

        assert len(subject.subscribers()) == 2

    def test_unsubscribe_by_identity(self):
        log = []
        subject = ContentUpdateSubject()
        subject.subscribe(Named(log, "x"))
        subject.subscribe(Named(log, "y"))

        assert subject.unsubscribe(Named(log, "x")) is True
        assert subject.unsubscribe(Named(log, "x")) is False
        assert [s.identity() for s in subject.subscribers()] == ["y"]

    def test_failing_subscriber_is_isolated(self, caplog):
        log = []
        subject = ContentUpdateSubject()
        subject.subscribe(Recorder(log, "before"))
        subject.subscribe(Exploding())
        subject.subscribe(Recorder(log, "after"))

        with caplog.at_level(logging.ERROR):
            delivered = subject.publish(EVENT)

        assert delivered == 2
        assert log == [("before", "s1"), ("after", "s1")]
        assert "failed for section s1" in caplog.text

    def test_subscribers_is_a_copy(self):
        subject = ContentUpdateSubject()
        subject.subscribe(Recorder([], "a"))

        subject.subscribers().clear()

        assert len(subject.subscribers()) == 1

    def test_event_defaults(self):
        assert EVENT.type == "SECTION_UPDATE"


class TestEmailNotification:
    """User subscriptions through the manager."""

    def test_subscriber_sends_mail(self):
        mailer = MagicMock()
        user = make_user()
        subscriber = EmailNotificationSubscriber(user, mailer)

        subscriber.update(EVENT)

        to, subject, body = mailer.send.call_args.args
        assert to == "ada@example.com"
        assert subject == "Content Update Notification"
        assert "Section s1 was updated in language 'en'" in body
        assert "title" in body and "_type" not in body

    def test_identity_is_user_id(self):
        user = make_user()

        assert EmailNotificationSubscriber(user, MagicMock()).identity() == str(user.id)

    def test_manager_subscribe_and_notify(self):
        mailer = MagicMock()
        manager = ContentUpdateManager(mailer=mailer)
        ada, bob = make_user("Ada"), make_user("Bob")

        assert manager.subscribe_user(ada) is True
        assert manager.subscribe_user(ada) is False
        manager.subscribe_user(bob)

        delivered = manager.notify_content_update(uuid.uuid4(), "it", {"title": "Ciao"})

        assert delivered == 2
        assert [c.args[0] for c in mailer.send.call_args_list] == ["ada@example.com", "bob@example.com"]

    def test_manager_unsubscribe(self):
        mailer = MagicMock()
        manager = ContentUpdateManager(mailer=mailer)
        ada = make_user()
        manager.subscribe_user(ada)

        assert manager.unsubscribe_user(ada) is True
        assert manager.notify_content_update("s1", "en", {}) == 0
        mailer.send.assert_not_called()

    def test_default_mailer_logs(self, caplog):
        manager = ContentUpdateManager()
        manager.subscribe_user(make_user())

        with caplog.at_level(logging.INFO):
            assert manager.notify_content_update("s1", "en", {"title": "Hi"}) == 1

        assert "Content Update Notification" in caplog.text
