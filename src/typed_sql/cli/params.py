"""
Parameter loading for the command line.

Parameters are written in YAML, so JSON works too. YAML gives ordinary
values their natural types (``5`` is an int, ``2024-05-01 10:00:00`` a
datetime, ``null`` is None), and the ``!raw`` tag marks raw SQL:

.. code-block:: yaml

    - users
    - [1, 2, 3]
    - {name: Ann, updated_at: !raw NOW()}
"""

from pathlib import Path
from typing import Any, List, Sequence

import yaml

from typed_sql.sql.core.values import RawExpression


class ParamsLoader(yaml.SafeLoader):
    """SafeLoader that understands the ``!raw`` tag."""


def _construct_raw(loader: yaml.SafeLoader, node: yaml.Node) -> RawExpression:
    return RawExpression(str(loader.construct_scalar(node)))


ParamsLoader.add_constructor("!raw", _construct_raw)


def parse_value(text: str) -> Any:
    """Parse a single YAML scalar or collection."""
    return yaml.load(text, Loader=ParamsLoader)


def load_params_file(path: Path) -> List[Any]:
    """
    Load a YAML/JSON list of parameters from a file.

    Raises:
        ValueError: If the document is not a list
        yaml.YAMLError: If the document cannot be parsed
    """
    data = yaml.load(path.read_text(encoding="utf-8"), Loader=ParamsLoader)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(
            f"Parameter file must contain a YAML/JSON list, got {type(data).__name__}"
        )
    return data


def parse_values(texts: Sequence[str]) -> List[Any]:
    return [parse_value(text) for text in texts]
