from __future__ import annotations

from decimal import Decimal

from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management.base import BaseCommand
from django.db import transaction

from modules.categories.models import Category
from modules.core.permissions import CASHIER_GROUP, OWNER_GROUP
from modules.products.models import Product

SAMPLE_IMAGE = "products/sample.jpg"

CATEGORIES = ["Crispy", "Balado", "Keripik", "Sambal"]

PRODUCTS = [
    (
        "Crispy",
        "Jamur Crispy Original",
        "Jamur crispy rasa original yang renyah dan gurih",
        Decimal("25000"),
    ),
    (
        "Crispy",
        "Jamur Crispy Pedas",
        "Jamur crispy dengan rasa pedas yang menggugah selera",
        Decimal("27000"),
    ),
    (
        "Balado",
        "Jamur Balado",
        "Jamur dengan bumbu balado khas Padang",
        Decimal("30000"),
    ),
    (
        "Keripik",
        "Keripik Jamur",
        "Keripik jamur tipis dan renyah",
        Decimal("20000"),
    ),
    (
        "Sambal",
        "Sambal Jamur",
        "Sambal dengan campuran jamur cincang",
        Decimal("35000"),
    ),
]


class Command(BaseCommand):
    help = "Seed database with the store's roles, staff accounts and sample catalog."

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        users_created = self._seed_users()
        categories = self._seed_categories()
        products = self._seed_products(categories)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"categories={len(categories)}, "
                f"products={len(products)}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        owner_group, _ = Group.objects.get_or_create(name=OWNER_GROUP)
        cashier_group, _ = Group.objects.get_or_create(name=CASHIER_GROUP)

        created = 0
        accounts = [
            ("owner", "Owner", "Jamur", owner_group),
            ("kasir", "Kasir", "Jamur", cashier_group),
        ]
        for username, first_name, last_name, group in accounts:
            user = User.objects.filter(username=username).first()
            if user is None:
                user = User.objects.create_user(
                    username,
                    password="password",
                    first_name=first_name,
                    last_name=last_name,
                )
                created += 1
            user.groups.add(group)
        return created

    def _seed_categories(self) -> dict[str, Category]:
        self.stdout.write("Creating categories...")
        categories: dict[str, Category] = {}
        for name in CATEGORIES:
            category, _ = Category.objects.get_or_create(
                name=name, defaults={"is_active": True}
            )
            categories[name] = category
        self.stdout.write(self.style.SUCCESS("Creating categories... Done!"))
        return categories

    def _seed_products(self, categories: dict[str, Category]) -> list[Product]:
        self.stdout.write("Creating products...")
        products: list[Product] = []
        for category_name, name, description, price in PRODUCTS:
            product, _ = Product.objects.get_or_create(
                name=name,
                defaults={
                    "category": categories[category_name],
                    "description": description,
                    "price": price,
                    "image": SAMPLE_IMAGE,
                    "is_active": True,
                },
            )
            products.append(product)
        self.stdout.write(self.style.SUCCESS("Creating products... Done!"))
        return products
