"""Provider backends module."""

from dataclasses import dataclass, field


@dataclass
class SubscriptionDefinition:
    """A communication channel a contact can opt in or out of on HubSpot."""

    id: str
    name: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "SubscriptionDefinition":
        """Build a definition from a HubSpot definitions payload entry."""
        return cls(id=str(data.get("id", "")), name=data.get("name") or "")


@dataclass
class ProviderOutcome:
    """Normalized result of one provider call."""

    provider: str
    success: bool
    message: str | None = None
    error: str | None = None
    skipped: bool = False
    extra: dict = field(default_factory=dict)

    @classmethod
    def ok(cls, provider: str, message: str | None = None, **extra) -> "ProviderOutcome":
        """Build a successful outcome."""
        return cls(provider=provider, success=True, message=message, extra=extra)

    @classmethod
    def soft_failure(cls, provider: str, message: str, skipped: bool = False) -> "ProviderOutcome":
        """Build an unsuccessful outcome that must not fail the request."""
        return cls(provider=provider, success=False, message=message, skipped=skipped)

    @classmethod
    def failed(cls, provider: str, error: str) -> "ProviderOutcome":
        """Build the outcome of a call that raised."""
        return cls(provider=provider, success=False, error=error)

    def as_dict(self) -> dict:
        """Serialize the outcome, provider specific fields are flattened."""
        data = {"provider": self.provider, "success": self.success}
        if self.message is not None:
            data["message"] = self.message
        if self.error is not None:
            data["error"] = self.error
        if self.skipped:
            data["skipped"] = True
        data.update(self.extra)
        return data
