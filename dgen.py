'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

seeded record generator for the funqy test suites.
'''

import numpy as np
from faker import Faker
from funqy import from_iterable, Enumerable
from typing import Any, Dict, List, Optional


class Generator:
    """
    schema interpreter.

    a schema is built from:
      - dicts: records, generated key by key (later keys can reference earlier ones)
      - one-element lists: [{'_dgen_items': schema, '_dgen_count': n or (low, high)}]
      - strings naming a faker provider ('word', 'name', ...), other strings as literals
      - (provider, kwargs) tuples for parametrised faker providers
      - dicts with '_dgen_provider': 'choice', 'ref', 'literal' or 'nested'
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

    def _nested(self, depth: int, width: int) -> List[Any]:
        """random nested int lists, handy for structural equality and flatten"""
        items = []
        for _ in range(width):
            if depth > 0 and self._rng.random() < 0.4:
                items.append(self._nested(depth - 1, width))
            else:
                items.append(int(self._rng.integers(0, 10)))
        return items

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_dgen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            value = context[key]
            return config["format"].format(value) if "format" in config else value

        if provider == "choice":
            # convert numpy's choice result to a native python type
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_dgen_provider 'literal' requires a 'value' key.")
            return config["value"]

        if provider == "nested":
            return self._nested(config.get("depth", 2), config.get("width", 3))

        raise ValueError(f"unknown _dgen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_dgen_provider" in schema:
                return self._resolve_provider(schema, current_context)
            record = {}
            for k, v in schema.items():
                # refs can look up into the parent and sideways into this record
                record[k] = self.create(v, {**current_context, **record})
            return record

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._get_count(item_schema)
            actual_item_schema = item_schema.get('_dgen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def _get_count(self, item_schema: Any) -> int:
        count = 5  # default count
        if isinstance(item_schema, dict) and "_dgen_count" in item_schema:
            count_config = item_schema["_dgen_count"]
            if isinstance(count_config, int):
                count = count_config
            elif isinstance(count_config, (list, tuple)) and len(count_config) == 2:
                low, high = count_config
                count = int(self._rng.integers(low, high, endpoint=True))
        return count


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        records = [self._generator.create(self._schema) for _ in range(count)]
        return from_iterable(records)

    def list(self, count: int) -> List[Any]:
        """plain list of count records, for the free functions"""
        return self.take(count).to.list()


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
