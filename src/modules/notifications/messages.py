"""Customer-facing WhatsApp order summary.

The text is written in Indonesian for the store's customers and uses
WhatsApp markup (``*bold*``).  Amounts are rendered as whole rupiah with
``.`` as the thousands separator, e.g. ``Rp 25.000``.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, List, Optional

from django.conf import settings
from django.utils import timezone

from modules.orders.constants import PaymentStatus

if TYPE_CHECKING:
    from modules.orders.models import Order


def format_rupiah(amount) -> str:
    """``Decimal("25000.50")`` → ``"Rp 25.001"``."""
    value = Decimal(amount or 0).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return "Rp " + f"{value:,}".replace(",", ".")


def build_order_message(order: Order, store_name: Optional[str] = None) -> str:
    """Render the order summary sent to the customer.

    Expects ``customer`` and ``items__product`` to be loaded (or loadable)
    on *order*.
    """
    store = store_name or settings.STORE_NAME
    customer = order.customer
    created = timezone.localtime(order.created_at)

    lines: List[str] = [
        f"Halo *{customer.name}*! 👋",
        "",
        f"Terima kasih sudah order di *{store}*",
        "",
        "📋 *Detail Pesanan*",
        f"Order ID: {order.id}",
        f"Tanggal: {created:%d %b %Y %H:%M}",
        "",
        "🛒 *Produk yang dipesan:*",
    ]
    for item in order.items.all():
        lines.append(
            f"- {item.product.name} x{item.quantity} = {format_rupiah(item.subtotal)}"
        )

    lines += [
        "",
        "💰 *Total Pembayaran*",
        f"Subtotal: {format_rupiah(order.total_amount)}",
        f"Ongkir: {format_rupiah(order.shipping_cost)}",
        f"*TOTAL: {format_rupiah(order.grand_total)}*",
        "",
    ]

    if customer.address:
        lines += ["📍 Alamat Pengiriman:", customer.address, ""]

    if order.payment_status == PaymentStatus.PAID:
        lines.append("✅ *LUNAS* - Terima kasih sudah berbelanja! 🙏")
    else:
        lines.append("Mohon segera lakukan pembayaran ya! 🙏")

    return "\n".join(lines)
