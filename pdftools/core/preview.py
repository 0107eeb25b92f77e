"""First-page thumbnails for uploaded PDFs."""

import base64
import io
import logging
from typing import Optional

import pypdfium2 as pdfium

from pdftools.core.config import settings
from pdftools.schemas.pdf import Preview

logger = logging.getLogger(__name__)

PREVIEW_ERROR = "Could not generate preview"


def render_preview(data: bytes, width: Optional[int] = None) -> Preview:
    """
    Render page 1 of a PDF as a PNG thumbnail.

    The page is scaled so its width equals ``width`` (the configured
    thumbnail width by default), keeping its aspect ratio. Rendering problems
    never escape: they produce a preview carrying only an error message.
    """
    width = width or settings.THUMBNAIL_WIDTH
    buffer = io.BytesIO()
    try:
        pdf = pdfium.PdfDocument(data)
        try:
            page_count = len(pdf)
            page = pdf[0]
            try:
                page_width, _ = page.get_size()
                bitmap = page.render(scale=width / page_width)
                image = bitmap.to_pil()
                # The PIL image shares the bitmap's buffer; encode before closing
                image.save(buffer, format="PNG")
                size = image.size
            finally:
                page.close()
        finally:
            pdf.close()
    except Exception as e:
        logger.warning("Preview rendering failed: %s", e, exc_info=True)
        return Preview(error=PREVIEW_ERROR)

    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return Preview(
        label=f"Preview - Page 1 of {page_count}",
        page_count=page_count,
        width=size[0],
        height=size[1],
        image=f"data:image/png;base64,{encoded}",
    )
