import io
from decimal import Decimal

import pytest
import responses
from django.conf import settings as django_settings
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.cache import cache
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient

from modules.categories.models import Category
from modules.core.permissions import CASHIER_GROUP, OWNER_GROUP
from modules.customers.models import Customer
from modules.orders.constants import NotificationStatus, PaymentStatus
from modules.orders.models import Order, OrderItem
from modules.products.models import Product

User = get_user_model()


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """Throttle counters live in the cache; start every test clean."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


# ---------------------------------------------------------------------------
# Users and roles
# ---------------------------------------------------------------------------


def _user_in_group(username: str, group_name: str):
    group, _ = Group.objects.get_or_create(name=group_name)
    user = User.objects.create_user(
        username=username, password="testpass123", first_name=username.title()
    )
    user.groups.add(group)
    return user


@pytest.fixture()
def owner_user():
    return _user_in_group("owner", OWNER_GROUP)


@pytest.fixture()
def cashier_user():
    return _user_in_group("kasir", CASHIER_GROUP)


@pytest.fixture()
def owner_client(owner_user):
    """APIClient force-authenticated as the store owner."""
    client = APIClient()
    client.force_authenticate(user=owner_user)
    return client


@pytest.fixture()
def cashier_client(cashier_user):
    """APIClient force-authenticated as a cashier."""
    client = APIClient()
    client.force_authenticate(user=cashier_user)
    return client


@pytest.fixture()
def roleless_client():
    """Authenticated user that belongs to no role group."""
    client = APIClient()
    user = User.objects.create_user(username="guest", password="testpass123")
    client.force_authenticate(user=user)
    return client


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


def _image_file(name="product.png", fmt="PNG", size=(8, 8)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color=(210, 140, 60)).save(buffer, format=fmt)
    return SimpleUploadedFile(
        name, buffer.getvalue(), content_type=f"image/{fmt.lower()}"
    )


@pytest.fixture()
def make_image():
    """Factory for small, valid image uploads."""
    return _image_file


@pytest.fixture()
def category():
    return Category.objects.create(name="Crispy")


@pytest.fixture()
def make_product(category):
    def _make(**overrides):
        defaults = {
            "category": category,
            "name": "Jamur Crispy Original",
            "description": "Jamur crispy rasa original",
            "price": Decimal("25000.00"),
            "image": _image_file(),
        }
        defaults.update(overrides)
        return Product.objects.create(**defaults)

    return _make


@pytest.fixture()
def product(make_product):
    return make_product()


@pytest.fixture()
def customer():
    return Customer.objects.create(
        name="Budi Santoso",
        phone_number="081234567890",
        address="Jl. Merdeka No. 1, Bandung",
    )


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_order(customer, cashier_user, product):
    """Persist an order directly (bypassing the service).

    ``lines`` is a list of ``(product, unit_price, quantity)`` tuples.
    """

    def _make(
        lines=None,
        shipping_cost=Decimal("0.00"),
        payment_status=PaymentStatus.UNPAID,
        notification_status=NotificationStatus.PENDING,
        created_at=None,
        order_customer=None,
    ):
        lines = lines or [(product, Decimal("25000.00"), 2)]
        total = sum((price * qty for _, price, qty in lines), Decimal("0.00"))
        order = Order.objects.create(
            cashier=cashier_user,
            customer=order_customer or customer,
            total_amount=total,
            shipping_cost=shipping_cost,
            payment_status=payment_status,
            notification_status=notification_status,
        )
        for line_product, price, qty in lines:
            OrderItem.for_line(order, line_product.id, price, qty).save()
        if created_at is not None:
            Order.objects.filter(id=order.id).update(created_at=created_at)
            order.refresh_from_db()
        return order

    return _make


@pytest.fixture()
def order(make_order):
    return make_order()


# ---------------------------------------------------------------------------
# WhatsApp gateway
# ---------------------------------------------------------------------------


@pytest.fixture()
def fonnte(settings):
    """Configured Fonnte token with the HTTP API stubbed by ``responses``."""
    settings.FONNTE_TOKEN = "test-fonnte-token"
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture()
def fonnte_url():
    return django_settings.FONNTE_URL
