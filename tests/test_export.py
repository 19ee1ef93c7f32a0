"""Tests for clipboard and MIME hand-off."""

from email_styler.export import build_clipboard_payload, build_mime_message
from email_styler.styles import StyleConfig


class TestClipboardPayload:
    def test_html_and_plain_text_identical(self):
        """Test that the plain-text representation is the markup itself."""
        payload = build_clipboard_payload("**hello**")

        assert payload.html == payload.plain_text
        assert payload.html.startswith("<!DOCTYPE html>")
        assert "<strong>hello</strong>" in payload.html

    def test_mime_map(self):
        payload = build_clipboard_payload("hi", wrap_in_html=False)

        assert payload.as_mime_map() == {"text/html": payload.html, "text/plain": payload.html}
        assert payload.html.startswith('<div dir="ltr"')

    def test_styles_applied(self):
        payload = build_clipboard_payload("hi", StyleConfig(font_size=21))

        assert "font-size:21px;" in payload.html


class TestMimeMessage:
    def test_alternative_parts(self):
        html = build_clipboard_payload("This is **bold**.").html
        message = build_mime_message(
            html,
            subject="Weekly update",
            sender="Me <me@example.com>",
            recipients=["a@example.com", "b@example.com"],
        )

        assert message.get_content_type() == "multipart/alternative"
        parts = message.get_payload()
        assert [part.get_content_type() for part in parts] == ["text/plain", "text/html"]
        assert "<strong>bold</strong>" in parts[1].get_payload(decode=True).decode("utf-8")
        assert parts[0].get_payload(decode=True).decode("utf-8") == html
        assert message["Subject"] == "Weekly update"
        assert message["To"] == "a@example.com, b@example.com"

    def test_non_ascii_subject_encoded(self):
        message = build_mime_message("<p>x</p>", subject="Café menu")

        assert "=?utf-8?" in message.as_string()

    def test_headers_optional(self):
        message = build_mime_message("<p>x</p>")

        assert message["Subject"] is None
        assert message["To"] is None

    def test_unicode_body(self):
        html = build_clipboard_payload("Em-dash: — and accents: café résumé naïve").html
        message = build_mime_message(html)

        payload = message.get_payload()[1].get_payload(decode=True).decode("utf-8")
        assert "—" in payload
        assert "naïve" in payload
