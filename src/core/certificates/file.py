import asyncio
import logging
from pathlib import Path
from typing import Optional

from src.core.certificates.interface import CertificateLoader
from src.core.errors import CertificateLoadError

logger = logging.getLogger(__name__)


class FileCertificateLoader(CertificateLoader):
    """Reads certificate files from the local file system"""

    def __init__(self, base_dir: Optional[str] = None):
        """
        Args:
            base_dir: Directory certificates are confined to. Paths are
                resolved relative to it, and absolute paths or paths that
                leave it are rejected. Without it, paths are used as given.
        """
        self._base_dir = Path(base_dir).resolve() if base_dir else None

    def resolve(self, path: str) -> Path:
        """
        Map a caller-supplied path onto the file system

        Raises:
            CertificateLoadError: If the path escapes the base directory
        """
        candidate = Path(path)
        if self._base_dir is None:
            return candidate

        if candidate.is_absolute():
            raise CertificateLoadError(path, "path must be relative to the certificate directory")

        resolved = (self._base_dir / candidate).resolve()
        if not resolved.is_relative_to(self._base_dir):
            raise CertificateLoadError(path, "path is outside the certificate directory")
        return resolved

    async def load(self, path: str) -> bytes:
        file_path = self.resolve(path)
        try:
            data = await asyncio.to_thread(file_path.read_bytes)
        except FileNotFoundError as e:
            raise CertificateLoadError(path, "file does not exist") from e
        except OSError as e:
            raise CertificateLoadError(path, e.strerror or str(e)) from e

        logger.debug(f"Loaded {len(data)} certificate bytes from {file_path}")
        return data
