import logging
import os
import sys
from datetime import date

# Add root to pythonpath
sys.path.append(os.getcwd())

from src.adapters.clock import FixedClock
from src.adapters.navigation import RecordingNavigator
from src.adapters.page_cache import InMemoryPageCache
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteCustomerRepo, SQLiteInvoiceRepo
from src.api.deps import get_settings
from src.components.invoices import CreateInvoiceInput, run_create
from src.domain.entities import Customer

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("seed")

CUSTOMERS = [
    Customer(id="cus-evil-rabbit", name="Evil Rabbit", email="evil@rabbit.com"),
    Customer(id="cus-delba", name="Delba de Oliveira", email="delba@oliveira.com"),
    Customer(id="cus-lee", name="Lee Robinson", email="lee@robinson.com"),
    Customer(id="cus-michael", name="Michael Novotny", email="michael@novotny.com"),
]

# (customer id, amount, status, date)
INVOICES = [
    ("cus-evil-rabbit", "157.95", "pending", date(2022, 12, 6)),
    ("cus-delba", "202.48", "pending", date(2022, 11, 14)),
    ("cus-lee", "3040.40", "paid", date(2022, 10, 29)),
    ("cus-michael", "448.00", "paid", date(2023, 9, 10)),
    ("cus-delba", "34.40", "pending", date(2023, 8, 5)),
]


def seed() -> None:
    settings = get_settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    logger.info("Seeding to %s", settings.db_path)

    SQLiteMigrator(settings.db_path, settings.migrations_dir).run_migrations()

    customer_repo = SQLiteCustomerRepo(settings.db_path)
    for customer in CUSTOMERS:
        customer_repo.save(customer)
    logger.info("Seeded %d customers", len(CUSTOMERS))

    invoice_repo = SQLiteInvoiceRepo(settings.db_path)
    cache = InMemoryPageCache()
    created = 0
    for customer_id, amount, status, day in INVOICES:
        result = run_create(
            CreateInvoiceInput(customer_id=customer_id, amount=amount, status=status),
            repo=invoice_repo,
            cache=cache,
            navigator=RecordingNavigator(),
            clock=FixedClock(day),
        )
        if result.success:
            created += 1
        else:
            logger.error("Could not seed invoice for %s: %s", customer_id, result.to_state())
    logger.info("Seeded %d invoices", created)


if __name__ == "__main__":
    seed()
