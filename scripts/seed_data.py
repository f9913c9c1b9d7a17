"""Seed a demo user, customers and invoices into the configured database.

Run after ``python -m dashboard.database.init_db``.
"""

from datetime import date

from dashboard.database.db import get_db_session
from dashboard.models import Customer, Invoice
from dashboard.services.user_service import UserService

DEMO_USER = {"name": "User", "email": "user@nextmail.com", "password": "123456"}

CUSTOMERS = [
    {"name": "Evil Rabbit", "email": "evil@rabbit.com", "image_url": "/customers/evil-rabbit.png"},
    {"name": "Delba de Oliveira", "email": "delba@oliveira.com", "image_url": "/customers/delba-de-oliveira.png"},
    {"name": "Lee Robinson", "email": "lee@robinson.com", "image_url": "/customers/lee-robinson.png"},
]

# (customer index, amount in cents, status, date)
INVOICES = [
    (0, 15795, "pending", date(2022, 12, 6)),
    (1, 20348, "pending", date(2022, 11, 14)),
    (2, 3040, "paid", date(2022, 10, 29)),
    (0, 44800, "paid", date(2023, 9, 10)),
    (1, 34577, "pending", date(2023, 8, 5)),
]


def seed() -> None:
    with get_db_session() as db:
        users = UserService(db=db)
        if users.get_by_email(DEMO_USER["email"]) is not None:
            print("Seed data already exists.")
            return

        try:
            users.create_user(**DEMO_USER)
            customers = [Customer(**row) for row in CUSTOMERS]
            db.add_all(customers)
            db.flush()
            db.add_all(
                Invoice(customer_id=customers[index].id, amount=amount, status=status, date=issued)
                for index, amount, status, issued in INVOICES
            )
            db.commit()
        except Exception:
            db.rollback()
            raise
        print(f"Seeded 1 user, {len(CUSTOMERS)} customers and {len(INVOICES)} invoices.")


if __name__ == "__main__":
    seed()
