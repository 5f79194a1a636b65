r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded fixture data for the lazinq tests.
'''

import numpy as np
from faker import Faker
from lazinq import from_iterable, Enumerable
from typing import Any, Dict, Iterator, Optional


class Generator:
    """
    schema interpreter.

    a schema is a dict of field -> field_spec where field_spec is one of:
      'word'                                  a faker provider name
      ('pyint', {'min_value': 1})             a faker provider with arguments
      {'_qen_provider': 'choice', 'from': []} a random pick, drawn from the numpy rng
      {'_qen_provider': 'ref', 'key': 'id'}   a previously generated field of the same record
      {'_qen_provider': 'literal', 'value': x}
    anything else is copied as is.
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, record: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            index = int(self._rng.integers(0, len(config["from"])))
            return config["from"][index]
        if provider == "ref":
            if config["key"] not in record:
                raise ValueError(f"reference to '{config['key']}' not found in current record.")
            return record[config["key"]]
        if provider == "literal":
            return config["value"]
        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create_field(self, field_spec: Any, record: Dict) -> Any:
        if isinstance(field_spec, dict) and "_qen_provider" in field_spec:
            return self._resolve_provider(field_spec, record)
        if isinstance(field_spec, tuple) and len(field_spec) == 2 and isinstance(field_spec[1], dict):
            return self._resolve_faker_method(field_spec[0], field_spec[1])
        if isinstance(field_spec, str) and hasattr(self._fake, field_spec):
            return self._resolve_faker_method(field_spec)
        return field_spec

    def create(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        record: Dict[str, Any] = {}
        for field, field_spec in schema.items():
            record[field] = self.create_field(field_spec, record)
        return record


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def take(self, count: int) -> Enumerable:
        """materialized records, backed by a list"""
        generator = Generator(self._seed)
        return from_iterable([generator.create(self._schema) for _ in range(count)])

    def stream(self, count: int) -> Iterator[Dict[str, Any]]:
        """one-shot generator of records, for exercising forward-only sources"""
        generator = Generator(self._seed)
        return (generator.create(self._schema) for _ in range(count))


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
