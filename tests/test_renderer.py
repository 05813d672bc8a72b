"""Tests for MailboxRenderer."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from papr.config.papr_config import RendererConfig
from papr.models.body import FrontMatterBody, OnlyFrontMatterBody, SimpleBody
from papr.models.header import (
    DateHeader,
    Email,
    FromHeader,
    OtherHeader,
    PatchSubject,
    Person,
    SimpleSubject,
    SubjectHeader,
    TaggedSubject,
)
from papr.models.message import Mailbox, Mailer, Message
from papr.services.mbox_parser.mailbox_parser import MailboxParser
from papr.services.rendering.mailbox_renderer import MailboxRenderer


class TestMailboxRenderer:
    """Test rendering of the parsed model."""

    @pytest.fixture
    def renderer(self):
        """Create a renderer with default settings."""
        return MailboxRenderer()

    @pytest.fixture
    def fixtures_dir(self):
        """Path to mbox fixtures."""
        return Path(__file__).parent / "fixtures" / "mbox"

    def test_render_mailer(self, renderer):
        mailer = Mailer(daemon="git@z", timestamp=datetime(1970, 1, 1, tzinfo=timezone.utc))

        assert renderer.render_mailer(mailer).plain == "From git@z Thu Jan  1 00:00:00 1970"

    def test_render_person(self, renderer):
        person = Person(name="John Doe", email=Email(user="john.doe", domain="email.com"))

        assert renderer.render_person(person).plain == "John Doe <john.doe@email.com>"

    def test_render_person_without_name(self, renderer):
        person = Person(email=Email(user="john.doe", domain="email.com"))

        assert renderer.render_person(person).plain == "<john.doe@email.com>"

    def test_render_obfuscated_person(self):
        """Test a ` at ` separator is quoted so it parses back."""
        config = RendererConfig()
        config.email.domain_separator = " at "
        renderer = MailboxRenderer(config)
        person = Person(name="John Doe", email=Email(user="john.doe", domain="email.com"))

        assert renderer.render_person(person).plain == 'John Doe <"john.doe at email.com">'

    def test_render_person_omit_email(self):
        config = RendererConfig()
        config.person.omit_email = True
        renderer = MailboxRenderer(config)

        person = Person(name="John Doe", email=Email(user="john.doe", domain="email.com"))
        anonymous = Person(email=Email(user="john.doe", domain="email.com"))

        assert renderer.render_person(person).plain == "John Doe"
        assert renderer.render_person(anonymous).plain == "<john.doe@email.com>"

    def test_render_email_omit_domain(self):
        config = RendererConfig()
        config.email.omit_domain = True
        renderer = MailboxRenderer(config)

        assert renderer.render_email(Email(user="john.doe", domain="email.com")).plain == "john.doe"

    def test_render_subjects(self, renderer):
        patch = PatchSubject(version=1, index=(1, 10), tags=("patch-tree",), description="foo")

        assert renderer.render_subject(patch).plain == "[PATCH v1 1/10] patch-tree: foo"
        assert renderer.render_subject(PatchSubject(description="foo")).plain == "[PATCH] foo"
        assert renderer.render_subject(TaggedSubject(tags=("a", "b"), description="c")).plain == (
            "a: b: c"
        )
        assert renderer.render_subject(SimpleSubject(description="hello")).plain == "hello"

    def test_render_headers(self, renderer):
        date = DateHeader(date=datetime(2022, 6, 8, 15, 0, 1, tzinfo=timezone.utc))

        assert renderer.render_header(date).plain == "Date: Wed, 08 Jun 2022 15:00:01 +0000"
        assert renderer.render_header(OtherHeader("X-Foo", "bar")).plain == "X-Foo: bar"

    def test_render_front_matter_body(self, renderer):
        body = FrontMatterBody(front_matter="msg", footers=(("A", "1"),), body="diff")

        assert renderer.render_body(body).plain == "msg\n\nA: 1\n---\ndiff"
        assert renderer.render_body(body.front_matter_only()).plain == "msg\n\nA: 1\n---\n"

    def test_render_styles(self, renderer):
        """Test configured styles are applied to spans."""
        text = renderer.render_header(OtherHeader("X-Foo", "bar"))

        assert any(str(span.style) == "bold" for span in text.spans)

    def test_render_without_color(self):
        config = RendererConfig(color=False)
        text = MailboxRenderer(config).render_header(OtherHeader("X-Foo", "bar"))

        assert text.spans == []

    def test_render_front_matter_mode_filters_headers(self, renderer):
        message = Message(
            mailer=None,
            headers=[
                SubjectHeader(subject=SimpleSubject(description="hi")),
                OtherHeader("Message-Id", "<1@x>"),
            ],
            body=FrontMatterBody(front_matter="msg", footers=(), body="diff"),
        )

        plain = renderer.render_message(message, front_matter=True).plain

        assert plain == "Subject: hi\n\nmsg\n\n---\n"

    def test_render_mailbox_separates_messages(self, renderer):
        mailer = Mailer(daemon="git@z", timestamp=datetime(1970, 1, 1, tzinfo=timezone.utc))
        message = Message(mailer=mailer, headers=[], body=SimpleBody(text="no newline"))

        plain = renderer.render_plain(Mailbox(messages=[message, message]))

        assert plain.count("From git@z") == 2
        assert "no newline\nFrom git@z" in plain

    @pytest.mark.parametrize("fixture", ["single_patch.mbx", "multi_patches.mbx", "digest.mbx"])
    def test_round_trip(self, renderer, fixtures_dir, fixture):
        """Test rendering and re-parsing gives the same model."""
        parser = MailboxParser()
        original = parser.parse((fixtures_dir / fixture).read_text(encoding="utf-8"))

        reparsed = parser.parse(renderer.render_plain(original))

        assert len(reparsed.messages) == len(original.messages)
        for before, after in zip(original.messages, reparsed.messages):
            assert after.mailer == before.mailer
            assert after.headers == before.headers
            assert after.body == before.body

    def test_round_trip_without_trailing_newline(self, renderer):
        """Test the last message gets no newline the archive did not have."""
        parser = MailboxParser()
        original = parser.parse("From git@z Thu Jan  1 00:00:00 1970\nSubject: x\n\nhello")

        plain = renderer.render_plain(original)
        reparsed = parser.parse(plain)

        assert not plain.endswith("\n")
        assert reparsed.messages[0].body == SimpleBody(text="hello")
        assert reparsed.messages == original.messages

    def test_round_trip_front_matter_only(self, renderer, fixtures_dir):
        """Test the front-matter rendering keeps footers intact."""
        parser = MailboxParser()
        original = parser.parse((fixtures_dir / "single_patch.mbx").read_text(encoding="utf-8"))

        reparsed = parser.parse(renderer.render_plain(original, front_matter=True))
        body = reparsed.messages[0].body

        assert isinstance(body, FrontMatterBody)
        assert body.footers == original.messages[0].body.footers
        assert body.body == ""
        assert isinstance(original.front_matter_only().messages[0].body, OnlyFrontMatterBody)
