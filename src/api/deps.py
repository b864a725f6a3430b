import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from src.adapters.clock import SystemClock
from src.adapters.page_cache import InMemoryPageCache
from src.adapters.sqlite.repos import SQLiteCustomerRepo, SQLiteInvoiceRepo
from src.components.invoices import InvoiceMutationConfig
from src.rules.loader import load_rules
from src.rules.models import InvoiceRules

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = PROJECT_ROOT
        self.data_dir = Path(os.environ.get("INVOICES_DATA_DIR", "./data"))
        self.db_path = str(self.data_dir / "invoices.db")
        self.rules_path = Path(os.environ.get("INVOICES_RULES_PATH", self.base_dir / "rules.yaml"))
        self.migrations_dir = self.base_dir / "migrations"


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> InvoiceRules:
    return load_rules(settings.rules_path)


@lru_cache
def get_mutation_config(rules: InvoiceRules = Depends(get_rules)) -> InvoiceMutationConfig:
    """Form schema and messages, built once per process."""
    return InvoiceMutationConfig.from_rules(rules)


# --- Repos ---
def get_invoice_repo(settings: Settings = Depends(get_settings)) -> SQLiteInvoiceRepo:
    return SQLiteInvoiceRepo(settings.db_path)


def get_customer_repo(settings: Settings = Depends(get_settings)) -> SQLiteCustomerRepo:
    return SQLiteCustomerRepo(settings.db_path)


# Page cache singleton shared by the listing view and the mutation routes
_page_cache_instance: InMemoryPageCache | None = None


def get_page_cache() -> InMemoryPageCache:
    """Get page cache singleton."""
    global _page_cache_instance
    if _page_cache_instance is None:
        _page_cache_instance = InMemoryPageCache()
    return _page_cache_instance


# Time adapter for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    """Get clock singleton."""
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance
