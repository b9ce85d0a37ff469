"""JSON file implementation of CustomerRepository."""

from typing import Optional

from ..interfaces.customer_repository import ICustomerRepository
from ...config import logger as log
from ...constants.config_keys import Collections
from ...domain.customer import Customer
from ...domain.errors import NotFoundError
from .connection import JSONFileStore


class JSONCustomerRepository(ICustomerRepository):
    """JSON file implementation of customer repository."""

    def __init__(self, store: JSONFileStore):
        self._store = store

    def locked(self):
        return self._store.lock(Collections.CUSTOMERS)

    def get_all(self) -> list[Customer]:
        """Gets all customers."""
        results = [Customer.from_dict(r) for r in self._store.read(Collections.CUSTOMERS)]
        log.debug("repo.customer", "get_all result", count=len(results))
        return results

    def get_by_id(self, customer_id: str) -> Optional[Customer]:
        """Gets a customer by ID."""
        log.debug("repo.customer", "get_by_id", customer_id=customer_id)
        for record in self._store.read(Collections.CUSTOMERS):
            if str(record["id"]) == customer_id:
                return Customer.from_dict(record)
        log.debug("repo.customer", "get_by_id result", found=False)
        return None

    def get_by_phone(self, phone: str) -> Optional[Customer]:
        """Gets a customer by exact phone number."""
        log.debug("repo.customer", "get_by_phone", phone=phone)
        for record in self._store.read(Collections.CUSTOMERS):
            if record.get("phone") == phone:
                return Customer.from_dict(record)
        return None

    def create(self, customer: Customer) -> Customer:
        """Creates a new customer."""
        log.info("repo.customer", "create", customer_id=customer.id, name=customer.name)
        with self._store.transaction(Collections.CUSTOMERS) as records:
            records.append(customer.to_dict())
        return customer

    def update(self, customer: Customer) -> Customer:
        """Replaces the stored customer with the same ID."""
        log.info("repo.customer", "update", customer_id=customer.id)
        with self._store.transaction(Collections.CUSTOMERS) as records:
            for index, record in enumerate(records):
                if str(record["id"]) == customer.id:
                    records[index] = customer.to_dict()
                    break
            else:
                raise NotFoundError("Customer", customer.id)
        return customer

    def delete(self, customer_id: str) -> Customer:
        """Removes a customer and returns it."""
        log.info("repo.customer", "delete", customer_id=customer_id)
        with self._store.transaction(Collections.CUSTOMERS) as records:
            for index, record in enumerate(records):
                if str(record["id"]) == customer_id:
                    return Customer.from_dict(records.pop(index))
            raise NotFoundError("Customer", customer_id)
