from typing import Callable

import pandas as pd
import streamlit as st
from export.pdf_export import build_receipt_pdf, receipt_rows
from flowbond.models import Order


def render_order(order: Order, t: Callable[..., str]):
    """Confirmation view for a submitted order with a PDF receipt download."""
    st.header(t("checkout.title"))
    if order.venue:
        st.caption(order.venue.name)
    st.subheader(t("checkout.orderNumber", number=order.order_number))
    st.caption(t("checkout.status", status=order.status))
    labels = {
        "item": t("cart.item"),
        "quantity": t("cart.quantity"),
        "price": t("cart.price"),
        "total": t("cart.total"),
        "free": t("checkout.free"),
    }
    rows = receipt_rows(order, labels)
    st.table(pd.DataFrame(rows[1:], columns=rows[0]))
    st.download_button(
        t("checkout.downloadReceipt"),
        data=build_receipt_pdf(order, labels),
        file_name=f"{order.order_number}.pdf",
        mime="application/pdf",
        key="download_receipt",
    )
