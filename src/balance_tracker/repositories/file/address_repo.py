"""Line-delimited text file implementation of AddressRepository."""

from pathlib import Path

from balance_tracker.core.exceptions import AddressSourceError


def parse_addresses(content: str) -> list[str]:
    """One address per line; surrounding whitespace stripped, blank lines ignored."""
    return [line.strip() for line in content.splitlines() if line.strip()]


class FileAddressRepository:
    """Reads tracked addresses from a text file such as wallets.txt."""

    def __init__(self, path: Path):
        self._path = Path(path)

    def list_addresses(self) -> list[str]:
        try:
            content = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise AddressSourceError(str(self._path), str(e)) from e
        return parse_addresses(content)
