"""Order domain constants.

Payment status and notification status are independent: staff may mark
an order PAID while its WhatsApp notification is still FAILED, and a
resend never touches the payment status.
"""

from django.db import models


class PaymentStatus(models.TextChoices):
    UNPAID = "UNPAID", "Unpaid"
    PAID = "PAID", "Paid"
    CANCELLED = "CANCELLED", "Cancelled"


class NotificationStatus(models.TextChoices):
    PENDING = "PENDING", "Pending"
    SENT = "SENT", "Sent"
    FAILED = "FAILED", "Failed"
