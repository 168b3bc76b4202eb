"""seeded sample records for the test modules."""
from typing import Any, Dict, List, Optional
from faker import Faker

DEPARTMENTS = ['eng', 'sales', 'hr', 'marketing']


def _faker(seed: Optional[int]) -> Faker:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def people(count: int = 20, seed: Optional[int] = 42) -> List[Dict[str, Any]]:
    """a list of person dicts; the same seed always gives the same people"""
    fake = _faker(seed)
    return [
        {
            'id': i + 1,
            'name': fake.first_name(),
            'age': fake.pyint(min_value=18, max_value=65),
            'salary': fake.pyint(min_value=30000, max_value=150000),
            'department': fake.random_element(DEPARTMENTS),
            'active': fake.pybool(),
        }
        for i in range(count)
    ]


def orders(person_ids: List[int], count: int = 30, seed: Optional[int] = 7) -> List[Dict[str, Any]]:
    """orders referencing the given person ids"""
    fake = _faker(seed)
    return [
        {
            'order_id': 1000 + i,
            'person_id': fake.random_element(person_ids),
            'amount': fake.pyfloat(min_value=5.0, max_value=500.0, right_digits=2),
        }
        for i in range(count)
    ]
