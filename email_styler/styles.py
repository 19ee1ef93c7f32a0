import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from email_styler.errors import StyleFileError

SYSTEM_FONT_STACK = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif'


class StyleConfig(BaseModel):
    """Rendering parameters supplied with every render call.

    Values are not range-checked: the style UI enforces its own slider bounds
    and the renderer only has to survive whatever it is handed.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    font_family: str = SYSTEM_FONT_STACK
    font_size: int = 16  # px
    line_height: float = 1.5  # unitless
    text_color: str = "#000000"
    background_color: str = "#ffffff"
    max_width: int = 560  # px
    paragraph_spacing: int = 18  # px
    margin_top: int = 20  # px
    margin_sides: int = 20  # px
    margin_bottom: int = 20  # px
    heading_weight: int = 600
    body_weight: int = 400
    image_radius: int = 8  # px
    heading_top_margin: float = 1.5  # rem

    def merged(self, **overrides: Any) -> "StyleConfig":
        """Return a copy with the given fields (snake_case or camelCase) replaced."""
        names = {field.alias: name for name, field in StyleConfig.model_fields.items() if field.alias}
        data = self.model_dump()
        data.update({names.get(key, key): value for key, value in overrides.items()})
        return StyleConfig.model_validate(data)


class FontFamilyOption(BaseModel):
    """Labelled font stack offered by the style controls"""

    label: str
    value: str


FONT_FAMILY_OPTIONS: list[FontFamilyOption] = [
    FontFamilyOption(label="System", value=SYSTEM_FONT_STACK),
    FontFamilyOption(label="Georgia", value='Georgia, "Times New Roman", Times, serif'),
    FontFamilyOption(label="Arial", value="Arial, Helvetica, sans-serif"),
    FontFamilyOption(label="Helvetica", value="Helvetica, Arial, sans-serif"),
    FontFamilyOption(label="Times New Roman", value='"Times New Roman", Times, Georgia, serif'),
    FontFamilyOption(label="Verdana", value="Verdana, Geneva, sans-serif"),
]

DEFAULT_STYLES = StyleConfig()


def load_styles(path: str | Path, base: StyleConfig | None = None) -> StyleConfig:
    """Load a style file exported by the style controls.

    Args:
        path: JSON file holding a full or partial style object.
        base: Styles to layer the file over (defaults to DEFAULT_STYLES).

    Returns:
        The merged StyleConfig.

    Raises:
        StyleFileError: The file is missing, is not a JSON object, or holds a
            value of the wrong type.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        msg = f"Style file not found: {path}"
        raise StyleFileError(msg) from e
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Could not read style file {path}: {e}"
        raise StyleFileError(msg) from e

    if not isinstance(raw, dict):
        msg = f"Style file {path} must contain a JSON object"
        raise StyleFileError(msg)

    try:
        return (base or DEFAULT_STYLES).merged(**raw)
    except ValidationError as e:
        msg = f"Invalid style file {path}: {e.error_count()} invalid value(s)"
        raise StyleFileError(msg) from e
