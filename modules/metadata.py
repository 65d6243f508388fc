"""
Article metadata — parses data.json records into ArticleMetadata.
"""
import json
from dataclasses import asdict, dataclass

from modules.errors import ParseError

# field name -> required JSON type
REQUIRED_FIELDS = {
    "title": str,
    "file_name": str,
    "posted": str,
    "hidden": bool,
}


@dataclass(frozen=True)
class ArticleMetadata:
    title: str
    file_name: str
    posted: str
    hidden: bool

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)


def parse_metadata(raw, path: str = None) -> ArticleMetadata:
    """Parse a metadata record from bytes or text.

    Every field in REQUIRED_FIELDS must be present with the right type;
    nothing is defaulted. Extra keys are ignored.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Metadata is not valid UTF-8: {e}", path) from e

    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ParseError(f"Malformed metadata: {e}", path) from e

    if not isinstance(data, dict):
        raise ParseError("Metadata must be a JSON object", path)

    for field, expected in REQUIRED_FIELDS.items():
        if field not in data:
            raise ParseError(f"Missing field '{field}'", path)
        value = data[field]
        # bool is an int subclass; keep the check exact both ways
        if type(value) is not expected:
            raise ParseError(
                f"Field '{field}' must be {expected.__name__}, got {type(value).__name__}",
                path,
            )

    return ArticleMetadata(**{field: data[field] for field in REQUIRED_FIELDS})
