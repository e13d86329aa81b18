"""Page template model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from atlas2html.config import ATLAS2HTML_ENCODING
from atlas2html.exceptions import TemplateError

TEMPLATE_MARKERS = (
    "{{destination_name}}",
    "{{navigation}}",
    "{{destination_name}}",
    "{{content}}",
)


class HtmlTemplate(BaseModel):
    """Five fixed text parts around the four insertion points of a page.

    A page is ``part1 + name + part2 + navigation + part3 + name + part4 +
    content + part5``.
    """

    model_config = ConfigDict(frozen=True)

    part1: str
    part2: str
    part3: str
    part4: str
    part5: str

    @classmethod
    def from_text(cls, text: str) -> "HtmlTemplate":
        """Split template text on its four markers, in order."""
        parts: list[str] = []
        remainder = text
        for marker in TEMPLATE_MARKERS:
            head, found, remainder = remainder.partition(marker)
            if not found:
                raise TemplateError(f"Template is missing the {marker} insertion point")
            parts.append(head)
        if any(marker in remainder for marker in TEMPLATE_MARKERS):
            raise TemplateError("Template has more insertion points than expected")
        parts.append(remainder)
        return cls(part1=parts[0], part2=parts[1], part3=parts[2], part4=parts[3], part5=parts[4])

    @classmethod
    def from_file(cls, path: str | Path) -> "HtmlTemplate":
        try:
            text = Path(path).read_text(encoding=ATLAS2HTML_ENCODING)
        except OSError as exc:
            raise TemplateError(f"Failed to open template file {path} for reading") from exc
        return cls.from_text(text)


DEFAULT_TEMPLATE = HtmlTemplate(
    part1="""<!DOCTYPE html>
<html>
  <head>
    <meta http-equiv="content-type" content="text/html; charset=UTF-8">
    <title>Lonely Planet</title>
    <link href="static/all.css" media="screen" rel="stylesheet" type="text/css">
  </head>

  <body>
    <div id="container">
      <div id="header">
        <div id="logo"></div>
        <h1>Lonely Planet: """,
    part2="""</h1>
      </div>

      <div id="wrapper">
        <div id="sidebar">
          <div class="block">
            <h3>Navigation</h3>
            <div class="content">
              <div class="inner">
""",
    part3="""
              </div>
            </div>
          </div>
        </div>

        <div id="main">
          <div class="block">
            <div class="secondary-navigation">
              <ul>
                <li class="first"><a href="#">""",
    part4="""</a></li>
              </ul>
              <div class="clear"></div>
            </div>
            <div class="content">
              <div class="inner">
""",
    part5="""
              </div>
            </div>
          </div>
        </div>
      </div>
    </div>
  </body>
</html>
""",
)
