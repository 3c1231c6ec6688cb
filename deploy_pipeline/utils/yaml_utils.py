"""YAML helpers that keep manifest scalars exactly as written

Manifests are parsed and re-emitted during interpolation. Plain scalars
that YAML would implicitly type (``1.10``, ``yes``, ``2024-01-01``) are kept
as :class:`VerbatimScalar` strings on load and emitted unquoted on dump, so
a round trip does not rewrite them.
"""

from typing import Any, Union

import yaml

from ..constants import YAML_DUMP_WIDTH

_TYPED_TAGS = (
    'tag:yaml.org,2002:int',
    'tag:yaml.org,2002:float',
    'tag:yaml.org,2002:bool',
    'tag:yaml.org,2002:timestamp',
)


class VerbatimScalar(str):
    """Plain scalar kept as its source text"""


class VerbatimLoader(yaml.SafeLoader):
    """Safe loader that does not convert implicitly typed scalars"""


class VerbatimDumper(yaml.SafeDumper):
    """Safe dumper that emits VerbatimScalar values unquoted"""

    def ignore_aliases(self, data: Any) -> bool:
        # A variable used twice must be written out twice, not as an anchor
        return True


def _construct_verbatim(loader: VerbatimLoader, node: yaml.ScalarNode) -> VerbatimScalar:
    return VerbatimScalar(loader.construct_scalar(node))


def _represent_verbatim(dumper: VerbatimDumper, data: VerbatimScalar) -> yaml.ScalarNode:
    text = str(data)
    tag = dumper.resolve(yaml.ScalarNode, text, (True, False))
    return dumper.represent_scalar(tag, text)


for _tag in _TYPED_TAGS:
    VerbatimLoader.add_constructor(_tag, _construct_verbatim)

VerbatimDumper.add_representer(VerbatimScalar, _represent_verbatim)


def load_yaml(content: Union[bytes, str]) -> Any:
    """
    Parse a single YAML document without implicit typing

    Raises:
        yaml.YAMLError: If the content is not valid YAML
    """
    return yaml.load(content, Loader=VerbatimLoader)


def dump_yaml(data: Any) -> bytes:
    """
    Serialize data back to YAML bytes

    Key order is preserved and long strings are not folded.
    """
    text = yaml.dump(
        data,
        Dumper=VerbatimDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        width=YAML_DUMP_WIDTH
    )
    return text.encode('utf-8')
