import logging
import os
from datetime import date, timedelta

from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteExpenseRepo, SQLiteVehicleRepo
from src.components.stock import (
    ExpenseInput,
    ExpenseService,
    PurchaseInput,
    SaleInput,
    VehicleService,
)

logger = logging.getLogger("seed")

# (model, number, days ago bought, price, seller, place, sale: (days ago, price, buyer) | None)
SAMPLE_FLEET = [
    ("Honda Activa 6G", "KA01AB1234", 140, 52000, "Ravi Kumar", "Mysuru", (95, 61000, "Anil")),
    ("Bajaj Pulsar 150", "KA05MN4321", 120, 68000, "Suresh", "Mandya", (30, 79500, "Deepa")),
    ("TVS Jupiter", "KA02CD5678", 75, 45000, "Honda Lane Motors", "Bengaluru", None),
    ("Royal Enfield Classic 350", "KA03EF9012", 40, 145000, "Mahesh", "Tumakuru", None),
    ("Hero Splendor Plus", "KA04GH3456", 10, 38000, "Lakshmi", "Hassan", None),
]


def seed() -> None:
    data_dir = os.environ.get("DEALER_DATA_DIR", "./data")
    os.makedirs(data_dir, exist_ok=True)

    db_path = f"{data_dir}/dealer.db"
    logger.info("Seeding to %s", db_path)
    SQLiteMigrator(db_path).run_migrations()

    vehicle_repo = SQLiteVehicleRepo(db_path)
    if vehicle_repo.list_vehicles():
        logger.info("Database already has vehicles, skipping seed.")
        return

    vehicles = VehicleService(vehicle_repo)
    expenses = ExpenseService(SQLiteExpenseRepo(db_path), vehicle_repo)
    today = date.today()

    for model, number, bought_ago, price, seller, place, sale in SAMPLE_FLEET:
        bought_on = today - timedelta(days=bought_ago)
        vehicle, errors = vehicles.record_purchase(
            PurchaseInput(
                brand_model=model,
                vehicle_number=number,
                purchase_date=bought_on.isoformat(),
                purchase_price=price,
                seller_name=seller,
                seller_place=place,
            )
        )
        if vehicle is None:
            logger.error("Could not seed %s: %s", number, errors)
            continue

        expenses.add_expense(
            ExpenseInput(
                vehicle_id=vehicle.id,
                amount=1500,
                date=(bought_on + timedelta(days=3)).isoformat(),
                description="Service and polish",
            )
        )

        if sale is not None:
            sold_ago, selling_price, buyer = sale
            vehicles.record_sale(
                vehicle.id,
                SaleInput(
                    sale_date=(today - timedelta(days=sold_ago)).isoformat(),
                    selling_price=selling_price,
                    buyer_name=buyer,
                ),
            )

    logger.info("Seeded %d vehicles.", len(SAMPLE_FLEET))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed()
