from dataclasses import dataclass

from errors import ConfigurationError


@dataclass(frozen=True)
class MissingPart:
    """Parse failure: the document has fewer than two markers."""
    marker: str
    found: int

    def __str__(self):
        return f"MissingPart: expected 3 parts around {self.marker!r}, found {self.found}"


@dataclass(frozen=True)
class BadgeTemplate:
    prefix: str
    middle: str
    suffix: str

    @classmethod
    def parse(cls, document: str, marker: str) -> "BadgeTemplate | MissingPart":
        # At most two splits: any further marker stays in the suffix
        parts = document.split(marker, 2)
        if len(parts) < 3:
            return MissingPart(marker=marker, found=len(parts))
        return cls(prefix=parts[0], middle=parts[1], suffix=parts[2])

    @classmethod
    def from_source(cls, document: str, marker: str) -> "BadgeTemplate":
        """Startup variant of parse(): a broken template is fatal."""
        result = cls.parse(document, marker)
        if isinstance(result, MissingPart):
            raise ConfigurationError(str(result))
        return result

    def render(self, color: str, count) -> str:
        return "".join((self.prefix, color, self.middle, str(count), self.suffix))
