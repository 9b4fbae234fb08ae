"""Slide element schema handed to the PPTX writer."""

import re
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from slide_scrub.config import Config
from slide_scrub.models.page_models import PageImage

config = Config()

HEX_COLOR = re.compile(r"^[0-9A-Fa-f]{6}$")


class Placement(BaseModel):
    """Element box in percent of the slide."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    x: float = Field(ge=0, le=100)
    y: float = Field(ge=0, le=100)
    w: float = Field(gt=0, le=100)
    h: float = Field(gt=0, le=100)


class ImageOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    image_data: bytes
    opacity: float = Field(default=1.0, ge=0, le=1)


class TextOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    font_size: Optional[int] = Field(default=None, gt=0)
    bold: bool = False
    color: str = Field(default="000000", description="RRGGBB, leading '#' allowed")
    align: Optional[Literal["left", "center", "right"]] = None
    opacity: float = Field(default=1.0, ge=0, le=1)

    @field_validator("color")
    @classmethod
    def _normalize_color(cls, value: str) -> str:
        value = value.lstrip("#")
        if not HEX_COLOR.match(value):
            raise ValueError(f"Invalid hex color: {value!r}")
        return value.upper()


class ImageElement(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["image"] = "image"
    placement: Placement
    options: ImageOptions


class TitleElement(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["title"] = "title"
    placement: Placement
    content: str
    options: TextOptions = TextOptions()


class TextElement(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["text"] = "text"
    placement: Placement
    content: str
    options: TextOptions = TextOptions()


class BulletListElement(BaseModel):
    """Newline separated items; leading bullet markers are stripped on export."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["bullet_list"] = "bullet_list"
    placement: Placement
    content: str
    options: TextOptions = TextOptions()


SlideElement = Annotated[
    Union[ImageElement, TitleElement, TextElement, BulletListElement],
    Field(discriminator="kind"),
]


class Slide(BaseModel):
    index: int
    elements: List[SlideElement]


FULL_BLEED = Placement(x=0, y=0, w=100, h=100)
TITLE_REGION = Placement(x=5, y=10, w=90, h=15)
BODY_REGION = Placement(x=5, y=30, w=90, h=50)


def editable_slide(page: PageImage, index: int) -> Slide:
    """Cleaned page as background plus editable title and body placeholders."""
    return Slide(
        index=index,
        elements=[
            ImageElement(
                placement=FULL_BLEED, options=ImageOptions(image_data=page.image_bytes)
            ),
            TitleElement(placement=TITLE_REGION, content=config.TITLE_PLACEHOLDER_TEXT),
            TextElement(placement=BODY_REGION, content=config.BODY_PLACEHOLDER_TEXT),
        ],
    )
