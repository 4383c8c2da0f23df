"""DTOs for authentication and credential passing."""

from dataclasses import dataclass

from docshare.domain.entities import UserEntity


@dataclass(frozen=True)
class Credentials:
    """Bearer credential for one backend call.

    Passed explicitly into every gateway method; nothing reads a token from
    ambient state. request_id is forwarded for log correlation.
    """

    token: str
    request_id: str | None = None

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("Credentials require a non-empty token")

    def headers(self) -> dict[str, str]:
        """Return the HTTP headers carrying this credential."""
        headers = {"Authorization": f"Bearer {self.token}"}
        if self.request_id:
            headers["X-Request-ID"] = self.request_id
        return headers

    def __repr__(self) -> str:
        return "Credentials(token=***)"


@dataclass(frozen=True)
class AuthSession:
    """Result of login/register: the token and the signed-in user."""

    token: str
    user: UserEntity


@dataclass(frozen=True)
class RegistrationData:
    """Input for self-registration."""

    name: str
    email: str
    password: str
    role: str
    department: str
