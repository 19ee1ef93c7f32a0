"""Tests for style records and style files."""

import json

import pytest
from pydantic import ValidationError

from email_styler.errors import EmailStylerError, StyleFileError
from email_styler.styles import DEFAULT_STYLES, FONT_FAMILY_OPTIONS, StyleConfig, load_styles


class TestStyleConfig:
    def test_defaults(self):
        assert DEFAULT_STYLES.font_size == 16
        assert DEFAULT_STYLES.line_height == 1.5
        assert DEFAULT_STYLES.paragraph_spacing == 18
        assert DEFAULT_STYLES.heading_weight == 600
        assert DEFAULT_STYLES.body_weight == 400
        assert DEFAULT_STYLES.text_color == "#000000"

    def test_camel_case_keys(self):
        """Test that the style UI's camelCase export is accepted."""
        styles = StyleConfig.model_validate({"fontSize": 18, "headingTopMargin": 2.0, "textColor": "#333333"})

        assert styles.font_size == 18
        assert styles.heading_top_margin == 2.0
        assert styles.text_color == "#333333"

    def test_dump_by_alias(self):
        data = StyleConfig().model_dump(by_alias=True)

        assert "fontFamily" in data
        assert "paragraphSpacing" in data

    def test_frozen(self):
        styles = StyleConfig()
        with pytest.raises(ValidationError):
            styles.font_size = 20

    def test_no_range_validation(self):
        styles = StyleConfig(font_size=400, heading_weight=37, line_height=-1.0)
        assert styles.font_size == 400

    def test_merged(self):
        styles = DEFAULT_STYLES.merged(font_size=20, textColor="#ff0000")

        assert styles.font_size == 20
        assert styles.text_color == "#ff0000"
        assert DEFAULT_STYLES.font_size == 16

    def test_font_family_options(self):
        labels = [option.label for option in FONT_FAMILY_OPTIONS]

        assert labels == ["System", "Georgia", "Arial", "Helvetica", "Times New Roman", "Verdana"]
        assert FONT_FAMILY_OPTIONS[0].value == DEFAULT_STYLES.font_family


class TestLoadStyles:
    def test_partial_file(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text(json.dumps({"fontSize": 20, "bodyWeight": 300}))

        styles = load_styles(path)

        assert styles.font_size == 20
        assert styles.body_weight == 300
        assert styles.max_width == DEFAULT_STYLES.max_width

    def test_layered_over_base(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text(json.dumps({"max_width": 700}))

        styles = load_styles(path, base=StyleConfig(font_size=14))

        assert styles.font_size == 14
        assert styles.max_width == 700

    def test_missing_file(self, tmp_path):
        with pytest.raises(StyleFileError) as exc_info:
            load_styles(tmp_path / "missing.json")

        assert "not found" in str(exc_info.value)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text("{not json")

        with pytest.raises(StyleFileError):
            load_styles(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text("[1, 2]")

        with pytest.raises(StyleFileError):
            load_styles(path)

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "styles.json"
        path.write_text(json.dumps({"fontSize": "large"}))

        with pytest.raises(StyleFileError) as exc_info:
            load_styles(path)

        assert isinstance(exc_info.value, EmailStylerError)
        assert "Invalid style file" in str(exc_info.value)
