"""Renderers writing ASCII art to the console or an HTML file."""

import html
from pathlib import Path

from exceptions import OutputError
from models import ConversionResult

HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>ASCII Art</title>
</head>
<body>
<pre style="font-family: '{font}', monospace; font-size: 4px; line-height: 1.0; letter-spacing: 0.5px;">
{body}
</pre>
</body>
</html>
"""


class ConsoleAsciiOutput:
    """Prints ASCII art to stdout, one grid row per line."""

    def out(self, result: ConversionResult) -> None:
        print(result.to_text(separator=" "))


class HtmlAsciiOutput:
    """Writes ASCII art into an HTML file."""

    def __init__(self, output_path: str | Path, font: str = "Courier New"):
        self.output_path = Path(output_path)
        self.font = font

    def render(self, result: ConversionResult) -> str:
        """Build the HTML document for a conversion result."""
        body = "\n".join(html.escape("".join(row)) for row in result.rows)
        return HTML_TEMPLATE.format(font=html.escape(self.font), body=body)

    def out(self, result: ConversionResult) -> Path:
        """Write the HTML document and return its path.

        Raises:
            OutputError: If the file cannot be written
        """
        try:
            with open(self.output_path, "w", encoding="utf-8") as f:
                f.write(self.render(result))
        except OSError as e:
            raise OutputError(f"Did not write output: {e}") from e
        return self.output_path
