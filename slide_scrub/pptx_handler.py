"""Write editable slide decks with python-pptx."""

import logging
import re
from io import BytesIO
from pathlib import Path
from typing import List, Optional, Tuple

from PIL import Image
from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, MSO_AUTO_SIZE, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.oxml.xmlchemy import OxmlElement
from pptx.util import Inches, Pt

from slide_scrub.config import Config
from slide_scrub.models.slide_models import (
    BulletListElement,
    ImageElement,
    Placement,
    Slide,
    TextOptions,
    TitleElement,
)

config = Config()
log = logging.getLogger(__name__)

BLANK_LAYOUT_INDEX = 6
BULLET_MARKER = re.compile(r"^[•\-*]\s?")
BULLET_CHAR = "•"
BULLET_INDENT = Inches(0.25)
ALIGNMENTS = {
    "left": PP_ALIGN.LEFT,
    "center": PP_ALIGN.CENTER,
    "right": PP_ALIGN.RIGHT,
}


def _box(placement: Placement, slide_width: int, slide_height: int) -> Tuple[int, int, int, int]:
    return (
        int(slide_width * placement.x / 100),
        int(slide_height * placement.y / 100),
        int(slide_width * placement.w / 100),
        int(slide_height * placement.h / 100),
    )


def _alpha_amount(opacity: float) -> str:
    return str(int(round(opacity * 100000)))


def _add_image(shapes, element: ImageElement, box: Tuple[int, int, int, int]) -> None:
    left, top, width, height = box
    data = element.options.image_data
    with Image.open(BytesIO(data)) as img:
        img_width, img_height = img.size

    # "contain": keep the aspect ratio and center inside the box
    scale = min(width / img_width, height / img_height)
    pic_width = int(img_width * scale)
    pic_height = int(img_height * scale)
    picture = shapes.add_picture(
        BytesIO(data),
        left + (width - pic_width) // 2,
        top + (height - pic_height) // 2,
        pic_width,
        pic_height,
    )

    if element.options.opacity < 1:
        blip = picture._element.blipFill.find(qn("a:blip"))
        alpha = OxmlElement("a:alphaModFix")
        alpha.set("amt", _alpha_amount(element.options.opacity))
        blip.append(alpha)


def _style_run(run, options: TextOptions, font_size: int, bold: bool) -> None:
    run.font.name = config.FONT_FACE
    run.font.size = Pt(font_size)
    run.font.bold = bold
    run.font.color.rgb = RGBColor.from_string(options.color)
    if options.opacity < 1:
        srgb = run._r.find(".//" + qn("a:srgbClr"))
        alpha = OxmlElement("a:alpha")
        alpha.set("val", _alpha_amount(options.opacity))
        srgb.append(alpha)


def _set_bullet(paragraph) -> None:
    p_pr = paragraph._p.get_or_add_pPr()
    p_pr.set("marL", str(BULLET_INDENT))
    p_pr.set("indent", str(-BULLET_INDENT))
    bullet = OxmlElement("a:buChar")
    bullet.set("char", BULLET_CHAR)
    p_pr.append(bullet)


def _add_text(shapes, element, box: Tuple[int, int, int, int]) -> None:
    options = element.options
    if isinstance(element, TitleElement):
        font_size = options.font_size or config.TITLE_FONT_SIZE
        bold = True
        align = options.align or "center"
    else:
        font_size = options.font_size or config.TEXT_FONT_SIZE
        bold = options.bold
        align = options.align or "left"

    if isinstance(element, BulletListElement):
        lines = [
            BULLET_MARKER.sub("", line)
            for line in element.content.split("\n")
            if line.strip() != ""
        ]
    else:
        lines = element.content.split("\n")

    text_box = shapes.add_textbox(*box)
    text_frame = text_box.text_frame
    text_frame.word_wrap = True
    text_frame.auto_size = MSO_AUTO_SIZE.TEXT_TO_FIT_SHAPE
    text_frame.vertical_anchor = MSO_ANCHOR.TOP

    for i, line in enumerate(lines):
        paragraph = text_frame.paragraphs[0] if i == 0 else text_frame.add_paragraph()
        paragraph.alignment = ALIGNMENTS[align]
        if isinstance(element, BulletListElement):
            _set_bullet(paragraph)
        run = paragraph.add_run()
        run.text = line
        _style_run(run, options, font_size, bold)


def build_pptx_from_slides(slides: List[Slide], output_path: Path) -> Optional[Path]:
    """Write a 16:9 deck, one slide per entry, elements stacked top to bottom."""
    if not slides:
        log.warning(f"No slides to write for {output_path}")
        return None

    prs = Presentation()
    prs.slide_width = Inches(config.SLIDE_WIDTH_IN)
    prs.slide_height = Inches(config.SLIDE_HEIGHT_IN)
    blank_layout = prs.slide_layouts[BLANK_LAYOUT_INDEX]

    for slide_data in slides:
        slide = prs.slides.add_slide(blank_layout)
        elements = sorted(slide_data.elements, key=lambda el: el.placement.y)
        for element in elements:
            box = _box(element.placement, prs.slide_width, prs.slide_height)
            if isinstance(element, ImageElement):
                _add_image(slide.shapes, element, box)
            else:
                _add_text(slide.shapes, element, box)
        log.debug(f"Slide {slide_data.index}: {len(elements)} element(s)")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    prs.save(str(output_path))
    log.info(f"Wrote {len(slides)} slide(s) to {output_path}")
    return output_path
