"""Preference actions, translating a recipient intent into provider calls."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from functools import partial

from mailprefs.enums import Source
from mailprefs.providers.backends import ProviderOutcome

logger = logging.getLogger(__name__)

DEFAULT_CAMPAIGN = "Current Campaign"


class InvalidPreferenceRequestError(ValueError):
    """Exception raised when a preference request lacks an email address."""


@dataclass
class PreferenceRequest:
    """A recipient preference change."""

    email: str
    campaign: str = DEFAULT_CAMPAIGN
    campaign_id: str = ""
    source: Source = Source.UNKNOWN

    @classmethod
    def from_payload(cls, payload) -> "PreferenceRequest":
        """Build a request from a decoded JSON body."""
        if not isinstance(payload, dict):
            raise InvalidPreferenceRequestError("Email is required")
        email = str(payload.get("email") or "").strip()
        if not email:
            raise InvalidPreferenceRequestError("Email is required")
        return cls(
            email=email,
            campaign=str(payload.get("campaign") or DEFAULT_CAMPAIGN),
            campaign_id=str(payload.get("campaignId") or payload.get("campaign_id") or ""),
            source=Source.parse(payload.get("source")),
        )

    @property
    def campaign_name(self) -> str:
        """Campaign name worth matching against, empty for the placeholder name."""
        return "" if self.campaign == DEFAULT_CAMPAIGN else self.campaign


@dataclass
class AggregateResult:
    """Merged outcome of every provider involved in an action."""

    message: str
    email: str
    hubspot: ProviderOutcome | None = None
    reachinbox: ProviderOutcome | None = None
    success: bool = True

    def as_dict(self) -> dict:
        """Serialize the result, providers not invoked are null."""
        return {
            "success": self.success,
            "message": self.message,
            "email": self.email,
            "hubspot": self.hubspot.as_dict() if self.hubspot else None,
            "reachinbox": self.reachinbox.as_dict() if self.reachinbox else None,
        }


def run_concurrently(**calls) -> dict[str, ProviderOutcome]:
    """
    Run provider calls in parallel and wait for all of them.

    A call raising does not interrupt the others, its exception is turned into
    a failed outcome keyed by the call name.
    """
    outcomes = {}
    with ThreadPoolExecutor(max_workers=max(len(calls), 1)) as executor:
        futures = {executor.submit(call): name for name, call in calls.items()}
        for future in as_completed(futures):
            name = futures[future]
            try:
                outcomes[name] = future.result()
            except Exception as err:  # noqa: BLE001
                logger.error("[%s] Error: %s", name, err)
                outcomes[name] = ProviderOutcome.failed(name, str(err))
    return outcomes


def subscribe(request: PreferenceRequest, hubspot) -> AggregateResult:
    """Re-subscribe a recipient, only HubSpot manages subscriptions."""
    logger.info("[Subscribe] Processing subscription for: %s", request.email)
    return AggregateResult(
        message="Successfully subscribed",
        email=request.email,
        hubspot=hubspot.subscribe(request.email),
    )


def unsubscribe_campaign(request: PreferenceRequest, hubspot, reachinbox) -> AggregateResult:
    """
    Unsubscribe a recipient from one campaign.

    The source decides which provider is called. When it is unknown both are
    called in parallel and a failure of one is reported in its own outcome.
    """
    logger.info(
        "[Unsubscribe Campaign] Processing for: %s, Campaign: %s, Source: %s",
        request.email,
        request.campaign,
        request.source,
    )
    calls = {
        "hubspot": partial(
            hubspot.unsubscribe, request.email, campaign_id=request.campaign_id, campaign_name=request.campaign_name
        ),
        "reachinbox": partial(reachinbox.unsubscribe, request.email, campaign_id=request.campaign_id),
    }

    if request.source == Source.REACHINBOX:
        outcomes = {"reachinbox": calls["reachinbox"]()}
    elif request.source == Source.HUBSPOT:
        outcomes = {"hubspot": calls["hubspot"]()}
    else:
        outcomes = run_concurrently(**calls)

    return AggregateResult(
        message=f"Successfully unsubscribed from {request.campaign}",
        email=request.email,
        **outcomes,
    )


def unsubscribe_all(request: PreferenceRequest, hubspot, reachinbox) -> AggregateResult:
    """Unsubscribe a recipient from every communication of both providers."""
    logger.info("[Unsubscribe All] Processing for: %s", request.email)
    outcomes = run_concurrently(
        hubspot=partial(hubspot.unsubscribe_all, request.email),
        reachinbox=partial(reachinbox.unsubscribe_all, request.email),
    )
    return AggregateResult(
        message="Successfully unsubscribed from all emails",
        email=request.email,
        **outcomes,
    )
