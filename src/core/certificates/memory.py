from typing import Dict, Optional

from src.core.certificates.interface import CertificateLoader
from src.core.errors import CertificateLoadError


class MemoryCertificateLoader(CertificateLoader):
    """
    In-memory certificate supplier, for callers that already hold the
    certificate bytes (uploads, secrets stores) and for tests
    """

    def __init__(self, certificates: Optional[Dict[str, bytes]] = None):
        self._certificates: Dict[str, bytes] = dict(certificates or {})

    def add(self, path: str, data: bytes) -> None:
        self._certificates[path] = data

    async def load(self, path: str) -> bytes:
        if path not in self._certificates:
            raise CertificateLoadError(path, "file does not exist")
        return self._certificates[path]
