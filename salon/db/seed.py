"""
Seed Data - fills the JSON store with a demo catalog, customers and visits.

Running it twice does not duplicate anything: services are matched by
name and customers by phone.

Run: python -m salon.db.seed
"""

from datetime import datetime, timedelta
from typing import Optional

from ..container import Container, get_container, set_container
from ..operations import appointments, catalog, customers
from ..repositories.json_store.factory import create_json_container


# =============================================================================
# CATALOG
# =============================================================================

DEFAULT_SERVICES = [
    {"name": "カット", "duration": 40, "price": 4500, "category": "カット", "description": "シャンプー・ブロー込み"},
    {"name": "カラー", "duration": 90, "price": 8000, "category": "カラー", "description": "全体カラー"},
    {"name": "パーマ", "duration": 120, "price": 12000, "category": "パーマ", "description": "デジタルパーマは別料金"},
    {"name": "トリートメント", "duration": 30, "price": 3000, "category": "ケア", "description": "集中補修トリートメント"},
    {"name": "ヘッドスパ", "duration": 40, "price": 5000, "category": "ケア", "description": "炭酸ヘッドスパ"},
    {"name": "シャンプー・ブロー", "duration": 20, "price": 2000, "category": "その他", "description": None},
]

# =============================================================================
# CUSTOMERS - each with past visits as (days ago, [(service, price override)], status)
# =============================================================================

DEMO_CUSTOMERS = [
    {
        "name": "山田 花子",
        "phone": "090-1234-5678",
        "kana": "やまだ はなこ",
        "email": "hanako.yamada@example.com",
        "gender": "female",
        "memo": "前髪は短めが好み",
        "preferences": {"hairType": "細く柔らかい", "allergyInfo": "", "skinType": "敏感肌"},
        "visits": [
            (60, [("カット", 4000)], "completed"),
            (30, [("カット", 4000), ("トリートメント", None)], "completed"),
            (7, [("カット", None), ("カラー", None)], "completed"),
            (-5, [("カット", None)], "scheduled"),
        ],
    },
    {
        "name": "佐藤 健",
        "phone": "080-2345-6789",
        "kana": "さとう けん",
        "gender": "male",
        "visits": [
            (45, [("ヘッドスパ", None)], "completed"),
            (14, [("パーマ", 10800)], "cancelled"),
        ],
    },
    {
        "name": "鈴木 美咲",
        "phone": "070-3456-7890",
        "kana": "すずき みさき",
        "email": "misaki@example.com",
        "gender": "female",
        "visits": [],
    },
]


def seed_services() -> dict[str, str]:
    """Creates missing catalog entries. Returns name -> service id."""
    existing = {s.name: s for s in catalog.list_services(is_active=True)}
    ids = {}
    for entry in DEFAULT_SERVICES:
        service = existing.get(entry["name"])
        if service:
            print(f"  - {entry['name']}: already present")
        else:
            service = catalog.create_service(
                entry["name"],
                entry["duration"],
                entry["price"],
                entry["category"],
                entry["description"],
            )
            print(f"  ✓ {service.name} ({service.duration_formatted}, {service.price_formatted})")
        ids[service.name] = service.id
    return ids


def _book_visits(customer, visits: list, service_ids: dict[str, str]) -> int:
    today = datetime.now().replace(hour=11, minute=0, second=0, microsecond=0)
    booked = 0
    for days_ago, items, status in visits:
        selection = []
        for name, price in items:
            item = {"id": service_ids[name]}
            if price is not None:
                item["price"] = price
            selection.append(item)

        appointment = appointments.create_appointment(
            client_name=customer.name,
            start=today - timedelta(days=days_ago),
            services=selection,
            client_id=customer.id,
        )
        if status != "scheduled":
            appointments.transition_appointment(appointment.id, status)
        booked += 1
    return booked


def seed_customers(service_ids: dict[str, str]) -> tuple[int, int]:
    """Creates demo customers not yet registered, with their visit history."""
    container = get_container()
    created = booked = 0
    for entry in DEMO_CUSTOMERS:
        if container.customers.get_by_phone(entry["phone"]):
            print(f"  - {entry['name']}: already registered")
            continue

        details = {k: v for k, v in entry.items() if k not in ("name", "phone", "visits")}
        customer = customers.create_customer(entry["name"], entry["phone"], **details)
        created += 1
        visits = _book_visits(customer, entry["visits"], service_ids)
        booked += visits
        print(f"  ✓ {customer.name} ({visits} appointments)")
    return created, booked


def seed_all(container: Optional[Container] = None) -> dict:
    """Runs the full seed.

    Args:
        container: Repositories to fill. Defaults to the JSON store in SALON_DATA_DIR.

    Returns:
        dict: Number of services, customers and appointments created.
    """
    set_container(container or create_json_container())

    print("=" * 70)
    print("SEED DATA - Salon Manager Demo")
    print("=" * 70)

    before = len(catalog.list_services(is_active="all"))
    print("\nCatalog:")
    service_ids = seed_services()
    services_created = len(catalog.list_services(is_active="all")) - before

    print("\nCustomers:")
    customers_created, appointments_created = seed_customers(service_ids)

    print("\n" + "=" * 70)
    print("SEED COMPLETE")
    print("=" * 70)

    return {
        "services": services_created,
        "customers": customers_created,
        "appointments": appointments_created,
    }


if __name__ == "__main__":
    from dotenv import load_dotenv

    load_dotenv()
    seed_all()
