"""Order receipt export."""
from __future__ import annotations

import io
from xml.sax.saxutils import escape
from typing import List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from core.utils import format_price
from flowbond.models import ItemSource, Order

TABLE_STYLE = TableStyle(
    [
        ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
        ("BOX", (0, 0), (-1, -1), 1, colors.black),
        ("INNERGRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
    ]
)


def receipt_rows(order: Order, labels: Optional[dict] = None) -> List[List[str]]:
    """Return the line table for ``order``, header row first, total row last."""
    labels = {
        "item": "Item",
        "quantity": "Qty",
        "price": "Price",
        "total": "Total",
        "free": "Free",
        **(labels or {}),
    }
    rows = [[labels["item"], labels["quantity"], labels["price"], labels["total"]]]
    for line in order.items:
        if line.source == ItemSource.REDEEMED:
            price = line_total = labels["free"]
        else:
            price = format_price(line.unit_price)
            line_total = format_price(line.unit_price * line.quantity)
        rows.append([line.menu_item.name, str(line.quantity), price, line_total])
    rows.append([labels["total"], "", "", format_price(order.total_amount)])
    return rows


def build_receipt_pdf(order: Order, labels: Optional[dict] = None) -> bytes:
    """Render ``order`` as a one page PDF receipt and return its bytes."""
    buf = io.BytesIO()
    styles = getSampleStyleSheet()
    doc = SimpleDocTemplate(
        buf, pagesize=LETTER, leftMargin=36, rightMargin=36, topMargin=36, bottomMargin=36,
        title=f"Order {order.order_number}",
    )
    story = []
    venue = order.venue.name if order.venue else "FlowBond"
    story += [Paragraph(f"<b>{escape(venue)}</b>", styles["Title"]), Spacer(1, 6)]
    story.append(Paragraph(f"Order {order.order_number}  |  {order.status}", styles["Normal"]))
    story.append(Spacer(1, 12))
    t = Table(receipt_rows(order, labels), hAlign="LEFT", colWidths=[260, 60, 100, 100])
    t.setStyle(TABLE_STYLE)
    story.append(t)
    doc.build(story)
    return buf.getvalue()
