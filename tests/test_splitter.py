"""Tests for MessageSplitter."""

from pathlib import Path

import pytest

from papr.services.mbox_parser.splitter import MessageSplitter, Span

MAILER = "From git@z Thu Jan  1 00:00:00 1970\n"


class TestMessageSplitter:
    """Test message boundary detection."""

    @pytest.fixture
    def splitter(self):
        """Create a MessageSplitter instance."""
        return MessageSplitter()

    @pytest.fixture
    def fixtures_dir(self):
        """Path to mbox fixtures."""
        return Path(__file__).parent / "fixtures" / "mbox"

    def test_find_boundaries_single_message(self, splitter):
        """Test a single message has one boundary at offset 0."""
        assert splitter.find_boundaries(MAILER + "Subject: a\n\nbody\n") == [0]

    def test_find_boundaries_multiple_messages(self, splitter):
        """Test every `From ` line is a boundary."""
        text = MAILER + "Subject: a\n\n" + MAILER + "Subject: b\n\n"
        assert splitter.find_boundaries(text) == [0, len(MAILER) + len("Subject: a\n\n")]

    def test_find_boundaries_ignores_from_header(self, splitter):
        """Test `From:` headers are not boundaries."""
        text = MAILER + "From: John Doe <john@doe.com>\n\nbody\n"
        assert splitter.find_boundaries(text) == [0]

    def test_find_boundaries_ignores_from_inside_line(self, splitter):
        """Test `From ` in the middle of a line is not a boundary."""
        text = MAILER + "Subject: a\n\nsee From here\n"
        assert splitter.find_boundaries(text) == [0]

    def test_find_boundaries_no_boundary(self, splitter):
        """Test text without `From ` lines has no boundaries."""
        assert splitter.find_boundaries("Subject: a\n\nbody\n") == []

    def test_find_boundaries_digest_separator(self, splitter):
        """Test the digest grammar puts the boundary on the `From ` line."""
        first = MAILER + "Subject: a\n\nbody\n--\n2.39.2\n\n"
        text = first + MAILER + "Subject: b\n\n"

        assert splitter._digest_boundaries(text) == [len(first)]
        assert splitter.find_boundaries(text) == [0, len(first)]

    def test_digest_separator_requires_version_line(self, splitter):
        """Test `--` followed by text is not a digest separator."""
        text = MAILER + "Subject: a\n\n--\nsignature\n\n" + MAILER
        assert splitter._digest_boundaries(text) == []

    def test_digest_separator_requires_blank_line(self, splitter):
        """Test the version line must be followed by a blank line."""
        text = MAILER + "Subject: a\n\n--\n2.39.2\n" + MAILER
        assert splitter._digest_boundaries(text) == []

    def test_digest_separator_at_start_of_text(self, splitter):
        """Test a digest separator on the very first line."""
        text = "--\n1.0\n\n" + MAILER
        assert splitter._digest_boundaries(text) == [len("--\n1.0\n\n")]

    def test_split_empty_input(self, splitter):
        """Test empty input yields a single empty span."""
        assert splitter.split("") == [Span(offset=0, text="")]

    def test_split_without_boundaries(self, splitter):
        """Test text without boundaries is one span."""
        text = "Subject: a\n\nbody\n"
        assert splitter.split(text) == [Span(offset=0, text=text)]

    def test_split_keeps_preamble(self, splitter):
        """Test text before the first boundary becomes its own span."""
        text = "preamble\n" + MAILER + "Subject: a\n"
        spans = splitter.split(text)

        assert [span.offset for span in spans] == [0, len("preamble\n")]
        assert spans[0].text == "preamble\n"
        assert spans[1].text.startswith("From git@z")

    def test_split_concatenation_reconstructs_archive(self, splitter, fixtures_dir):
        """Test spans concatenate back to the input for every fixture."""
        for path in sorted(fixtures_dir.glob("*.mbx")):
            text = path.read_text(encoding="utf-8")
            spans = splitter.split(text)

            assert "".join(span.text for span in spans) == text
            for span in spans:
                assert text[span.offset : span.offset + len(span.text)] == span.text

    def test_split_multi_patches(self, splitter, fixtures_dir):
        """Test the three-message fixture splits into three spans."""
        text = (fixtures_dir / "multi_patches.mbx").read_text(encoding="utf-8")
        spans = splitter.split(text)

        assert len(spans) == 3
        assert all(span.text.startswith("From git@z") for span in spans)

    def test_split_digest(self, splitter, fixtures_dir):
        """Test the digest fixture keeps the signature in the first message."""
        text = (fixtures_dir / "digest.mbx").read_text(encoding="utf-8")
        spans = splitter.split(text)

        assert len(spans) == 2
        assert spans[0].text.endswith("--\n2.39.2\n\n")
