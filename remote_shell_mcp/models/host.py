"""Host directory data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HostRecord:
    """Credentials for one machine in the host directory."""

    identifier: str
    principal: str
    secret: str = field(repr=False)
    port: int

    @property
    def endpoint(self) -> str:
        """Connection endpoint in host:port form."""
        return f"{self.identifier}:{self.port}"
