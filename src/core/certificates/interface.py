from abc import ABC, abstractmethod
import base64


class CertificateLoader(ABC):
    """Abstract supplier of raw certificate material"""

    @abstractmethod
    async def load(self, path: str) -> bytes:
        """
        Load raw certificate bytes

        Args:
            path: Location of the certificate (e.g. "certs/primary.pfx")

        Returns:
            Certificate bytes exactly as stored

        Raises:
            CertificateLoadError: If the path does not exist or is unreadable
        """
        pass

    async def load_encoded(self, path: str) -> str:
        """Load certificate bytes and base64 encode them for transport"""
        return encode_certificate(await self.load(path))


def encode_certificate(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")
